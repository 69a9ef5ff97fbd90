import json

import pytest


@pytest.fixture
def deck_file(tmp_path):
    """A small deck spread over buckets 0, 1 and 3."""
    data = {
        "cards": [
            {"front": "猫", "back": "cat", "bucket": 0},
            {"front": "house", "back": "maison", "tags": ["fr"], "bucket": 1},
            {"front": "apple", "back": "pomme", "hint": "fruit", "bucket": 3},
            {"front": "dog", "back": "chien"},
        ],
        "history": [
            {"card": 0, "difficulty": "wrong"},
            {"card": 1, "difficulty": "easy"},
            {"card": 0, "difficulty": "WRONG"},
            {"card": 2, "difficulty": "hard"},
        ],
    }
    path = tmp_path / "deck.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path
