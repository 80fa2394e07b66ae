# tests/test_rules.py
import pytest

from accessibility_checker.checker_base import BaseChecker
from accessibility_checker.checkers import (
    EmptyLinkChecker,
    FormLabelChecker,
    HeadingChecker,
    ImageChecker,
    LangChecker,
    SkipLinkChecker,
    TitleChecker,
)
from accessibility_checker.document import Document
from accessibility_checker.issue import (
    FormFieldDetails,
    HeadingDetails,
    ImageDetails,
    IssueType,
    LinkDetails,
    Severity,
)
from accessibility_checker.main_checker import AccessibilityChecker

from conftest import ACCESSIBLE_PAGE, BARE_PAGE, BROKEN_PAGE


def run(checker, html):
    return checker.check(Document.from_html(html))


def types_of(issues):
    return [i.type for i in issues]


# --- images ---


@pytest.mark.parametrize("n", [0, 1, 3])
def test_each_image_without_alt_is_flagged(n):
    html = "<body>" + "".join(f'<img src="/{i}.png">' for i in range(n)) + '<img src="/ok.png" alt="ok"></body>'
    issues = run(ImageChecker(), html)
    assert len(issues) == n
    assert all(i.type == IssueType.MISSING_ALT_TEXT for i in issues)
    assert all(i.severity == Severity.HIGH for i in issues)
    assert [i.details.src for i in issues] == [f"/{i}.png" for i in range(n)]


def test_empty_alt_marks_decorative_image():
    assert run(ImageChecker(), '<img src="/divider.png" alt="">') == []


def test_image_without_src_still_flagged():
    issues = run(ImageChecker(), "<img>")
    assert len(issues) == 1
    assert issues[0].details == ImageDetails(src=None)
    assert issues[0].element == "<img/>"


# --- form labels ---


def test_label_for_matching_id_satisfies_field():
    html = '<form><input id="e" type="email"></form><label for="e">Email</label>'
    assert run(FormLabelChecker(), html) == []


def test_unlabelled_input_flagged_with_field_details():
    issues = run(FormLabelChecker(), '<input id="e" type="email" name="contact">')
    assert len(issues) == 1
    issue = issues[0]
    assert issue.type == IssueType.MISSING_FORM_LABEL
    assert issue.severity == Severity.HIGH
    assert issue.details == FormFieldDetails(input_type="email", input_name="contact", input_id="e")


def test_field_defaults_when_type_and_name_missing():
    issues = run(FormLabelChecker(), "<textarea></textarea>")
    assert issues[0].details == FormFieldDetails(input_type="text", input_name="unnamed", input_id=None)


@pytest.mark.parametrize(
    "html",
    [
        '<input aria-label="Search">',
        '<input aria-labelledby="search-heading">',
        '<input type="hidden" name="csrf">',
        '<input type="HIDDEN" name="csrf">',
    ],
)
def test_fields_that_need_no_label(html):
    assert run(FormLabelChecker(), html) == []


@pytest.mark.parametrize(
    "html",
    [
        '<input aria-label="  ">',
        '<input aria-labelledby="">',
        '<input id="x"><label for="y">Other</label>',
        '<input id=""><label for="">Empty</label>',
        "<select><option>A</option></select>",
        "<textarea></textarea>",
    ],
)
def test_fields_missing_a_usable_label(html):
    assert types_of(run(FormLabelChecker(), html)) == [IssueType.MISSING_FORM_LABEL]


# --- links ---


@pytest.mark.parametrize("html", ['<a href="/x"></a>', '<a href="/x">   </a>', '<a href=""></a>', '<a href="/x"><img src="/i.png"></a>'])
def test_empty_links_flagged(html):
    issues = run(EmptyLinkChecker(), html)
    assert types_of(issues) == [IssueType.EMPTY_LINK]
    assert issues[0].severity == Severity.HIGH
    assert isinstance(issues[0].details, LinkDetails)


@pytest.mark.parametrize("html", ['<a href="/x">Home</a>', '<a href="/x" aria-label="Home"></a>', "<a></a>", '<a name="top"></a>'])
def test_links_with_text_or_without_href_pass(html):
    assert run(EmptyLinkChecker(), html) == []


def test_empty_link_records_href():
    issues = run(EmptyLinkChecker(), '<a href="/cart"><span></span></a>')
    assert issues[0].details.href == "/cart"


@pytest.mark.parametrize("href", ["#main", "#content", "#skip", "#skip-to-content"])
def test_skip_link_targets(href):
    assert run(SkipLinkChecker(), f'<a href="{href}">Skip</a>') == []


@pytest.mark.parametrize("html", ["<body></body>", '<a href="#top">Top</a>', '<a href="/#main">Main</a>'])
def test_missing_skip_link(html):
    issues = run(SkipLinkChecker(), html)
    assert types_of(issues) == [IssueType.MISSING_SKIP_LINK]
    assert issues[0].severity == Severity.MEDIUM


# --- headings ---


def test_no_headings_flagged_once():
    issues = run(HeadingChecker(), "<body><p>Text</p></body>")
    assert types_of(issues) == [IssueType.MISSING_HEADINGS]
    assert issues[0].severity == Severity.MEDIUM
    assert issues[0].element == "<body>"


def test_skipped_heading_level_points_at_later_heading():
    issues = run(HeadingChecker(), "<h1>A</h1><h2>B</h2><h4>C</h4>")
    assert len(issues) == 1
    issue = issues[0]
    assert issue.type == IssueType.IMPROPER_HEADING_STRUCTURE
    assert issue.severity == Severity.MEDIUM
    assert issue.element == "<h4>C</h4>"
    assert issue.details == HeadingDetails(level=4, previous_level=2)


def test_sequential_headings_pass():
    assert run(HeadingChecker(), "<h1>A</h1><h2>B</h2><h3>C</h3><h4>D</h4>") == []


def test_going_back_up_levels_is_allowed():
    assert run(HeadingChecker(), "<h1>A</h1><h2>B</h2><h3>C</h3><h2>D</h2><h1>E</h1>") == []


def test_only_first_heading_skip_reported():
    issues = run(HeadingChecker(), "<h1>A</h1><h3>B</h3><h2>C</h2><h5>D</h5>")
    assert len(issues) == 1
    assert issues[0].element == "<h3>B</h3>"


def test_page_starting_below_h1_is_not_a_skip():
    assert run(HeadingChecker(), "<h3>A</h3><h4>B</h4>") == []


# --- title and lang ---


@pytest.mark.parametrize("html", ["<html><head></head></html>", "<html><head><title>  </title></head></html>"])
def test_missing_page_title(html):
    issues = run(TitleChecker(), html)
    assert types_of(issues) == [IssueType.MISSING_PAGE_TITLE]
    assert issues[0].severity == Severity.HIGH
    assert issues[0].element == "<title></title>"


def test_page_title_present():
    assert run(TitleChecker(), "<html><head><title>Home</title></head></html>") == []


@pytest.mark.parametrize("html", ["<html><body></body></html>", '<html lang=""><body></body></html>', "<body></body>"])
def test_missing_lang(html):
    issues = run(LangChecker(), html)
    assert types_of(issues) == [IssueType.MISSING_LANG_ATTRIBUTE]
    assert issues[0].severity == Severity.MEDIUM


def test_lang_present():
    assert run(LangChecker(), '<html lang="fr"><body></body></html>') == []


# --- engine ---


def test_bare_page_issues():
    issues = AccessibilityChecker().check_html(BARE_PAGE)
    assert [(i.type, i.severity) for i in issues] == [
        (IssueType.MISSING_HEADINGS, Severity.MEDIUM),
        (IssueType.MISSING_PAGE_TITLE, Severity.HIGH),
        (IssueType.MISSING_LANG_ATTRIBUTE, Severity.MEDIUM),
        (IssueType.MISSING_SKIP_LINK, Severity.MEDIUM),
    ]


def test_accessible_page_has_no_issues():
    assert AccessibilityChecker().check_html(ACCESSIBLE_PAGE) == []


def test_issues_follow_rule_order_not_source_order():
    issues = AccessibilityChecker().check_html(BROKEN_PAGE)
    assert types_of(issues) == [
        IssueType.MISSING_ALT_TEXT,
        IssueType.IMPROPER_HEADING_STRUCTURE,
        IssueType.MISSING_FORM_LABEL,
        IssueType.LOW_CONTRAST,
        IssueType.MISSING_PAGE_TITLE,
        IssueType.MISSING_LANG_ATTRIBUTE,
        IssueType.EMPTY_LINK,
        IssueType.MISSING_SKIP_LINK,
    ]


class ExplodingChecker(BaseChecker):
    name = "exploding"

    def _run_checks(self):
        self._add_issue(IssueType.MISSING_PAGE_TITLE, Severity.HIGH, "<title></title>")
        raise RuntimeError("boom")


def test_failing_checker_is_skipped_and_logged(caplog):
    engine = AccessibilityChecker([ExplodingChecker(), LangChecker()])
    issues = engine.check_html("<html><body></body></html>")
    # partial output of the failed rule is discarded
    assert types_of(issues) == [IssueType.MISSING_LANG_ATTRIBUTE]
    assert "exploding" in caplog.text


def test_checker_can_be_reused_across_documents():
    checker = ImageChecker()
    assert len(run(checker, "<img><img>")) == 2
    assert len(run(checker, "<img>")) == 1
