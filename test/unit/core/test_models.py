import dataclasses

import pytest

from pixsearch.core.models import DEFAULT_PAGE_SIZE, ImageResult, SearchRequest


def _result(**overrides):
    fields = {
        "preview_url": "https://cdn.example.com/p.jpg",
        "full_url": "https://cdn.example.com/f.jpg",
        "tags": "sea,  beach , ,sunset",
        "attribution": "Uploaded by: @sam",
        "stats": "1 Comments, 2 Likes, 3 Downloads",
    }
    fields.update(overrides)
    return ImageResult(**fields)


def test_tag_list_splits_and_trims():
    assert _result().tag_list == ["sea", "beach", "sunset"]


def test_to_dict_has_the_five_fields():
    assert set(_result().to_dict()) == {
        "preview_url",
        "full_url",
        "tags",
        "attribution",
        "stats",
    }


@pytest.mark.parametrize("field", ["preview_url", "tags", "stats"])
def test_image_result_rejects_empty_fields(field):
    with pytest.raises(ValueError):
        _result(**{field: ""})


def test_image_result_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _result().tags = "other"


def test_search_request_params():
    req = SearchRequest(query="cats", page=2)
    assert req.page_size == DEFAULT_PAGE_SIZE == 36
    assert req.to_params("k123") == {
        "key": "k123",
        "q": "cats",
        "image_type": "photo",
        "per_page": 36,
        "page": 2,
    }


@pytest.mark.parametrize("page,page_size", [(0, 36), (-1, 36), (1, 0)])
def test_search_request_rejects_bad_paging(page, page_size):
    with pytest.raises(ValueError):
        SearchRequest(query="cats", page=page, page_size=page_size)


def test_record_and_pagination_modules_are_documented():
    from pixsearch.application import pagination
    from pixsearch.core import models

    assert models.__doc__ and models.__doc__.strip()
    assert pagination.__doc__ and pagination.__doc__.strip()
