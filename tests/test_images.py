from conftest import build_index, parse

from image_modal.images import is_candidate, rewrite_images

PAGE = "docs/guide.html"


def _index():
    return build_index(
        "docs/img/diagram.png",
        "docs/img/diagram_thumbnail.jpg",
        "images/photo.png",
        "images/photo_thumbnail.webp",
        "docs/img/plain.png",
    )


def test_rewrites_image_to_thumbnail():
    soup = parse('<p><img src="img/diagram.png" alt="Diagram"></p>')
    result = rewrite_images(soup, PAGE, _index())

    img = soup.find("img")
    assert result.count == 1
    assert result.any_rewritten
    assert img["src"] == "img/diagram_thumbnail.jpg"
    assert img["data-src"] == "img/diagram.png"
    assert img["loading"] == "lazy"
    assert img["data-toggle"] == "modal"
    assert img["alt"] == "Diagram"


def test_thumbnail_in_parent_directory_keeps_its_extension():
    soup = parse('<p><img src="../images/photo.png"></p>')
    rewrite_images(soup, PAGE, _index())

    img = soup.find("img")
    assert img["src"] == "../images/photo_thumbnail.webp"
    assert img["data-src"] == "../images/photo.png"


def _assert_untouched(html, index=None):
    soup = parse(html)
    before = [dict(img.attrs) for img in soup.find_all("img")]
    result = rewrite_images(soup, PAGE, index or _index())
    assert result.count == 0
    assert not result.any_rewritten
    assert [dict(img.attrs) for img in soup.find_all("img")] == before


def test_brand_parent_is_excluded():
    _assert_untouched('<a class="navbar-brand"><img src="img/diagram.png"></a>')


def test_brand_match_is_a_substring_match():
    _assert_untouched('<div class="branding"><img src="img/diagram.png"></div>')


def test_logomark_image_is_excluded():
    _assert_untouched('<p><img class="svg logomark" src="img/diagram.png"></p>')


def test_brand_on_grandparent_does_not_exclude():
    soup = parse('<div class="brand"><a href="#"><img src="img/diagram.png"></a></div>')
    assert rewrite_images(soup, PAGE, _index()).count == 1


def test_nopreview_on_image_or_parent_opts_out():
    _assert_untouched('<p><img data-nopreview src="img/diagram.png"></p>')
    _assert_untouched('<div data-nopreview><img src="img/diagram.png"></div>')


def test_external_image_is_skipped():
    _assert_untouched('<p><img src="https://example.com/x.png"></p>')


def test_untracked_image_is_skipped():
    _assert_untouched('<p><img src="img/unknown.png"></p>')


def test_image_without_thumbnail_is_skipped():
    _assert_untouched('<p><img src="img/plain.png"></p>')


def test_image_without_src_is_skipped():
    _assert_untouched('<p><img alt="empty"></p>')


def test_second_pass_changes_nothing():
    soup = parse('<p><img src="img/diagram.png"></p><p><img src="../images/photo.png"></p>')
    assert rewrite_images(soup, PAGE, _index()).count == 2
    once = str(soup)
    assert rewrite_images(soup, PAGE, _index()).count == 0
    assert str(soup) == once


def test_counts_only_rewritten_images():
    soup = parse(
        '<p><img src="img/diagram.png"></p>'
        '<p><img src="img/plain.png"></p>'
        '<p><img src="https://example.com/x.png"></p>'
        '<p><img src="../images/photo.png"></p>'
    )
    assert rewrite_images(soup, PAGE, _index()).count == 2


def test_image_at_document_root_is_not_a_candidate():
    soup = parse('<img src="img/diagram.png">')
    assert not is_candidate(soup.find("img"))
