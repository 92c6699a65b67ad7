import pytest

DEFAULT_WORDS = ["ACE", "PEACE", "LEAP", "PEN", "BENT", "TOY", "ALE", "LANE", "HALE", "EEL", "CAT", "DOG"]


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("\n".join(w.lower() for w in DEFAULT_WORDS) + "\n")
    return path
