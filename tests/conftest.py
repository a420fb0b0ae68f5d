import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from env_masker import Editor, MaskingEngine, TextDocument

ENV_TEXT = (
    "# config\n"
    "HOST=localhost\n"
    "PORT=5432\n"
    "DB_PASSWORD=hunter2\n"
    "API_KEY=abc123\n"
    "\n"
    "# misc\n"
    "FEATURE=on\n"
)

JSON_TEXT = (
    "{\n"
    '  "token": "s3cr3t",\n'
    '  "port": 8080,\n'
    '  "name": "demo"\n'
    "}\n"
)


def masked_values(document, masks):
    """Text under each masked span, in order."""
    text = document.get_text()
    return [text[span.start:span.end] for span in masks]


@pytest.fixture
def env_document():
    return TextDocument("file:///app/.env", ENV_TEXT, file_name="/app/.env")


@pytest.fixture
def json_document():
    return TextDocument(
        "file:///app/appsettings.json", JSON_TEXT,
        file_name="/app/appsettings.json", language_id="json",
    )


@pytest.fixture
def editor(env_document):
    return Editor(env_document)


@pytest.fixture
def engine():
    return MaskingEngine()
