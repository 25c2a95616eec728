import string

import pytest

from officer_service.session_id import generate_session_id

URL_SAFE = set(string.ascii_letters + string.digits + "-_")


def test_generate_session_id_size():
    session_id = generate_session_id(32)
    assert session_id != ""
    assert len(session_id) == 43


def test_generate_session_id_size_invalid():
    with pytest.raises(ValueError):
        generate_session_id(0)


def test_negative_size_invalid():
    with pytest.raises(ValueError, match="greater than 0"):
        generate_session_id(-1)


def test_default_size():
    assert len(generate_session_id()) == 43


def test_url_safe_alphabet_without_padding():
    session_id = generate_session_id(64)
    assert len(session_id) == 86
    assert set(session_id) <= URL_SAFE


def test_ids_are_unique():
    ids = {generate_session_id() for _ in range(100)}
    assert len(ids) == 100