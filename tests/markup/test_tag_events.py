import pytest

from chromagrad.errors import MarkupError
from chromagrad.markup import TagKind, iter_tag_events
from chromagrad.markup.events import local_name


def kinds(text):
    return [(event.kind, event.name) for event in iter_tag_events(text)]


def test_self_closing_and_explicit_close():
    events = kinds('<linearGradient id="a"><stop offset="0"/></linearGradient>')
    assert events == [
        (TagKind.OPEN, "linearGradient"),
        (TagKind.EMPTY, "stop"),
        (TagKind.CLOSE, "linearGradient"),
    ]


def test_empty_pair_is_not_self_closing():
    events = kinds("<linearGradient id=\"e\">\n</linearGradient><linearGradient/>")
    assert events == [
        (TagKind.OPEN, "linearGradient"),
        (TagKind.CLOSE, "linearGradient"),
        (TagKind.EMPTY, "linearGradient"),
    ]


def test_self_closing_child_before_parent_close():
    events = kinds("<g><g/></g>")
    assert events == [(TagKind.OPEN, "g"), (TagKind.EMPTY, "g"), (TagKind.CLOSE, "g")]


def test_fragments_comments_and_prolog():
    text = (
        '<?xml version="1.0"?>\n'
        '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
        "<!-- leading comment -->\n"
        '<stop offset="0"/>\n'
        '<svg:linearGradient xmlns:svg="http://www.w3.org/2000/svg"/>\n'
    )
    assert kinds(text) == [(TagKind.EMPTY, "stop"), (TagKind.EMPTY, "linearGradient")]


def test_attributes_are_kept():
    (event,) = list(iter_tag_events('<stop offset="50%" style="stop-color:red"/>'))
    assert event.attributes == {"offset": "50%", "style": "stop-color:red"}


@pytest.mark.parametrize("text", [
    "<linearGradient><stop/>",
    "<a></b>",
    '<stop offset="0>',
])
def test_malformed_markup_raises(text):
    with pytest.raises(MarkupError):
        list(iter_tag_events(text))


def test_local_name():
    assert local_name("{http://www.w3.org/2000/svg}stop") == "stop"
    assert local_name("svg:stop") == "stop"
    assert local_name("stop") == "stop"


def test_text_ending_like_a_self_closing_tag():
    events = kinds("<g>a/></g>")
    assert events == [(TagKind.OPEN, "g"), (TagKind.CLOSE, "g")]


def test_doctype_entities_resolve():
    text = (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<!-- Generator: some editor -->\n"
        '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "svg11.dtd" [\n'
        '  <!ENTITY ns_svg "http://www.w3.org/2000/svg">\n'
        "]>\n"
        '<svg xmlns="&ns_svg;"><stop offset="0"/></svg>\n'
    )
    events = list(iter_tag_events(text))
    assert events[0].attributes == {"xmlns": "http://www.w3.org/2000/svg"}
    assert [(e.kind, e.name) for e in events[1:]] == [(TagKind.EMPTY, "stop"), (TagKind.CLOSE, "svg")]


def test_byte_order_mark_before_declaration():
    text = '\ufeff<?xml version="1.0" encoding="UTF-8"?>\n<svg><stop offset="0"/></svg>'
    assert kinds(text) == [(TagKind.OPEN, "svg"), (TagKind.EMPTY, "stop"), (TagKind.CLOSE, "svg")]
