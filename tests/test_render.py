import ast
import re
import sys

import pytest

from pascal.render import RenderOptions, render, render_html, render_raw, render_text
from pascal.triangle import Triangle, build


def test_raw_depth_four():
    out = render_raw(build(4))

    assert out == "[1]\n[1, 1]\n[1, 2, 1]\n[1, 3, 3, 1]\n[1, 4, 6, 4, 1]\n"


def test_raw_with_headers_is_parseable():
    triangle = build(6)
    lines = render_raw(triangle, row_headers=True).splitlines()

    assert len(lines) == 7
    for i, line in enumerate(lines):
        prefix, _, listing = line.partition(": ")
        assert prefix == str(i)
        assert tuple(ast.literal_eval(listing)) == triangle.rows[i]


def test_raw_only_row():
    assert render_raw(build(5, only=True)) == "[1, 5, 10, 10, 5, 1]\n"


def test_text_auto_width_pyramid():
    lines = render_text(build(2)).splitlines()

    # max() is 2, so every column is two characters wide.
    assert [line.rstrip() for line in lines] == [
        "     1",
        "   1   1",
        " 1   2   1",
    ]
    assert [len(line) for line in lines] == [14, 18, 22]


def test_text_explicit_width():
    lines = render_text(build(2), width=4).splitlines()

    assert lines[2].rstrip() == "   1       2       1"


def test_text_narrow_width_grows_to_fit():
    lines = render_text(build(5), width=1).splitlines()

    last = lines[-1].split()
    assert last == ["1", "5", "10", "10", "5", "1"]


def test_text_headers():
    lines = render_text(build(3), row_headers=True).splitlines()

    for i, line in enumerate(lines):
        assert line.lstrip().startswith(f"{i}: ")


def test_text_negative_width_rejected():
    with pytest.raises(ValueError):
        render_text(build(2), width=-1)


def test_html_depth_two_anchors():
    triangle = build(2)
    html = render_html(triangle)

    central = re.findall(r'<td id="central-column">(\d+)</td>', html)
    assert central == ["1"]

    biggest = re.findall(r'<td id="biggest-number" style="color: red;">(\d+)</td>', html)
    assert biggest
    assert all(int(value) == triangle.max() for value in biggest)


def test_html_document_structure():
    html = render_html(build(6))

    assert "<!DOCTYPE html>" in html
    assert "<h1>Pascal triangle of depth 6</h1>" in html
    assert "<p>Biggest number is 20.</p>" in html
    assert "<p>It has 2 digits.</p>" in html
    assert '<a href="#central-column">Central column</a>' in html
    assert '<a href="#biggest-number">Biggest number</a>' in html
    assert html.count("<tr>") == 7
    assert html.rstrip().endswith("</html>")


def test_html_padding_mirrors_text():
    html = render_html(build(3))
    rows = re.findall(r"<tr>(.*?)</tr>", html)

    # depth 3: row i has (3 - i) lead cells, 2 * (i + 1) value cells, 7 - (3 - i) trail cells.
    for i, row in enumerate(rows):
        assert row.count("<td") == (3 - i) + 2 * (i + 1) + 7 - (3 - i)
        assert row.startswith("<td></td>" * (3 - i))


def test_html_row_headers():
    html = render_html(build(2), row_headers=True)

    for i in range(3):
        assert f'<tr><th scope="row">{i}</th>' in html


def test_render_dispatch():
    triangle = build(3)

    assert render(triangle, RenderOptions(fmt="raw")) == render_raw(triangle)
    assert render(triangle, RenderOptions()) == render_text(triangle)
    assert render(triangle, RenderOptions(fmt="html", row_headers=True)) == render_html(triangle, True)
    assert render(triangle, RenderOptions(width=7)) == render_text(triangle, width=7)


def test_render_unknown_format():
    with pytest.raises(ValueError):
        render(build(1), RenderOptions(fmt="pdf"))


def test_only_mode_text_keeps_requested_depth():
    lines = render_text(build(4, only=True)).splitlines()

    # max() is 6, so columns are two wide and the row sits behind 4 blank cells.
    assert len(lines) == 1
    assert lines[0].rstrip() == " " * 8 + " 1   4   6   4   1"
    assert len(lines[0]) == 2 * (4 + 10 + 5)


def test_only_mode_html_anchors_and_summary():
    html = render_html(build(4, only=True))
    rows = re.findall(r"<tr>(.*?)</tr>", html)

    assert len(rows) == 1
    assert rows[0].startswith("<td></td>" * 4 + '<td id="central-column">')
    # The single row is row 0, so every value carries the central-column id.
    assert re.findall(r'<td id="central-column">(\d+)</td>', html) == ["1", "4", "6", "4", "1"]
    assert 'id="biggest-number"' not in html
    assert "<p>Biggest number is 6.</p>" in html
    assert "<p>It has 1 digits.</p>" in html


@pytest.fixture
def default_digit_limit():
    if not hasattr(sys, "set_int_max_str_digits"):
        yield None
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)


def test_renderers_handle_values_past_digit_limit(default_digit_limit):
    huge = 10**5000
    triangle = Triangle(depth=0, only=False, rows=((huge,),))

    raw = render_raw(triangle)
    assert raw == "[1" + "0" * 5000 + "]\n"

    text = render_text(triangle)
    assert text.split() == ["1" + "0" * 5000]

    html = render_html(Triangle(depth=1, only=False, rows=((huge,), (1, huge))))
    assert '<td id="central-column">1' + "0" * 5000 + "</td>" in html

    if default_digit_limit is not None:
        assert sys.get_int_max_str_digits() == default_digit_limit


def test_html_summary_past_digit_limit(default_digit_limit):
    # Only depth feeds max(), so a stub row is enough.
    html = render_html(Triangle(depth=14400, only=True, rows=((1,),)))
    digits = re.search(r"<p>It has (\d+) digits\.</p>", html)

    assert digits is not None
    assert int(digits.group(1)) > 4300
