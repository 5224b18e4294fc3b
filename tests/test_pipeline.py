import pytest

from html2hiccup.models import ConverterConfig
from html2hiccup.pipeline import convert_html


@pytest.mark.parametrize(
    ("html", "expected"),
    [
        ('<span id="x"></span>', "[span#x]"),
        ('<div class="a b">text</div>', '[div.a.b "text"]'),
        ('<div class="a/b">text</div>', '[div {:class "a/b"} "text"]'),
        ('<div id="x" class="a b"></div>', "[div#x.a.b]"),
        ("<p>  </p>", "[p]"),
        ("<ul><li>a</li><li>b</li></ul>", '[ul [li "a"] [li "b"]]'),
        ("<br>", "[br]"),
        ('<a href="/q?a=1&amp;b=2" title="&quot;hi&quot;">x</a>', '[a {:href "/q?a=1&b=2" :title "\\"hi\\""} "x"]'),
        ("<DIV>upper</DIV>", '[div "upper"]'),
    ],
)
def test_convert_html(html: str, expected: str) -> None:
    assert convert_html(html) == expected


def test_convert_html_without_shorthand() -> None:
    config = ConverterConfig(use_shorthand=False)
    assert convert_html('<div class="a b">text</div>', config) == '[div {:class "a b"} "text"]'


def test_convert_html_full_document() -> None:
    html = "<html><head><title>T</title></head><body>\n<p>Hi</p>\n</body></html>"
    assert convert_html(html) == '[p "Hi"]'
    config = ConverterConfig(skip_document_frame=False)
    assert convert_html(html, config) == '[html [head [title "T"]] [body [p "Hi"]]]'


def test_convert_html_multiple_roots() -> None:
    html = "<p>a</p>\n<p>b</p>"
    assert convert_html(html) == '[p "a"]'
    assert convert_html(html, ConverterConfig(all_roots=True)) == '[p "a"]\n[p "b"]'


def test_convert_html_without_elements() -> None:
    assert convert_html("") == ""
    assert convert_html("only text") == ""


def test_config_accepts_aliases() -> None:
    config = ConverterConfig.model_validate({"useShorthand": False, "allRoots": True})
    assert config.use_shorthand is False
    assert config.all_roots is True
    assert config.skip_document_frame is True


def test_convert_html_keeps_nbsp_cell() -> None:
    assert convert_html("<td>&nbsp;</td>") == '[td "\xa0"]'


def test_convert_html_skips_head_without_body() -> None:
    html = "<html><head><title>T</title></head><p>x</p></html>"
    assert convert_html(html) == '[p "x"]'
    config = ConverterConfig(skip_document_frame=False)
    assert convert_html(html, config) == '[html [head [title "T"]] [p "x"]]'
