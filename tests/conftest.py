"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest
from justnotes.config import Config, ContentConfig, ServerConfig
from justnotes.core.index import ContentIndex


@pytest.fixture
def curriculum() -> dict[str, Any]:
    """Curriculum document with both the flat and the scheme shape."""
    return {
        "branches": {
            "cse": {
                "label": "Computer Science",
                "shortLabel": "CSE",
                "semesters": {
                    "3": {
                        "notes": [],
                        "pyqs": [
                            {
                                "title": "Jan 2023 Paper",
                                "url": "http://x/p.pdf",
                                "examMonth": "Jan",
                                "examYear": 2023,
                            }
                        ],
                        "questionBanks": [],
                    },
                    "4": {
                        "notes": [
                            {"title": "Module 1", "url": "http://x/m1.pdf", "module": 1},
                            {"title": "Module 2", "url": "http://x/m2.pdf", "module": 2},
                        ],
                    },
                },
            },
            "ece": {
                "label": "Electronics",
                "shortLabel": "ECE",
                "semesters": {},
            },
        },
        "schemes": {
            "2022": {
                "branches": {
                    "cse": {
                        "label": "Computer Science",
                        "shortLabel": "CSE",
                        "semesters": {
                            "3": {
                                "subjects": {
                                    "cs301": {
                                        "code": "CS301",
                                        "name": "Data Structures",
                                        "credits": 4,
                                        "notes": [
                                            {
                                                "title": "DS Module 2",
                                                "url": "http://x/ds2.pdf",
                                                "module": 2,
                                                "fileType": "pdf",
                                                "isOfficial": True,
                                            }
                                        ],
                                        "pyqs": [],
                                        "modelPapers": [
                                            {
                                                "title": "Model Paper",
                                                "url": "http://x/mqp.pdf",
                                                "set": 1,
                                            }
                                        ],
                                        "questionBanks": [],
                                        "importantQuestions": [],
                                    },
                                    "cs302": {
                                        "code": "CS302",
                                        "name": "Digital Design",
                                        "credits": 3,
                                    },
                                },
                            },
                        },
                    },
                },
            },
            "2021": {
                "branches": {},
            },
        },
    }


@pytest.fixture
def index(curriculum: dict[str, Any]) -> ContentIndex:
    return ContentIndex(curriculum)


@pytest.fixture
def index_file(tmp_path: Path, curriculum: dict[str, Any]) -> Path:
    """Write the curriculum document to a JSON file."""
    path = tmp_path / "data" / "curriculum.json"
    path.parent.mkdir(exist_ok=True)
    path.write_text(json.dumps(curriculum), encoding="utf-8")
    return path


@pytest.fixture
def test_config(index_file: Path) -> Config:
    """Create a test configuration pointing at the curriculum file."""
    return Config(
        server=ServerConfig(),
        content=ContentConfig(index_path=index_file),
    )
