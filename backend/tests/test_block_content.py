import pytest

from resource_hub.schemas.blocks import validate_content


def test_alert_type_is_optional():
    assert validate_content("alert", {"content": "Atenção"}) == {"content": "Atenção"}
    assert validate_content("alert", {"content": "ok", "type": "success"}) == {"content": "ok", "type": "success"}


def test_custom_html_defaults_to_false():
    assert validate_content("custom", {"content": "<p>x</p>"}) == {"content": "<p>x</p>", "html": False}


def test_link_requires_url_and_text():
    links = {"links": [{"url": "https://example.com", "text": "Mapa"}]}
    assert validate_content("link", links) == links
    with pytest.raises(ValueError, match="links"):
        validate_content("link", {"links": [{"url": "https://example.com"}]})


def test_video_accepts_snake_case_and_stores_camel_case():
    out = validate_content("video", {"embed_url": "e", "thumbnail_url": "t"})
    assert out == {"embedUrl": "e", "thumbnailUrl": "t"}


def test_file_download_requires_filename():
    with pytest.raises(ValueError, match="fileDownload"):
        validate_content("fileDownload", {"url": "#"})


def test_unknown_block_type():
    with pytest.raises(ValueError, match="unknown blockType"):
        validate_content("carousel", {})


def test_non_object_content_is_rejected():
    with pytest.raises(ValueError):
        validate_content("text", "just a string")
