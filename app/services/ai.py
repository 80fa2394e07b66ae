"""AI service: Together.ai explanations and suggested fixes for accessibility issues."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Sequence

from openai import OpenAI, OpenAIError

from accessibility_checker import fixes
from accessibility_checker.issue import EnrichedIssue, Enrichment, Issue, IssueType

from ..config import EnrichmentConfig

logger = logging.getLogger(__name__)

FALLBACK_EXPLANATION = "This accessibility issue should be addressed to improve user experience."

EXPLANATION_TOKENS = 100
ALT_TEXT_TOKENS = 50
LABEL_TOKENS = 30
LINK_TEXT_TOKENS = 30

EXPLANATION_PROMPTS: Dict[IssueType, str] = {
    IssueType.MISSING_ALT_TEXT: (
        "Explain in simple terms why alt text is important for web accessibility. Keep it under "
        "100 words and focus on how it helps users with visual impairments."
    ),
    IssueType.MISSING_FORM_LABEL: (
        "Explain why form labels are crucial for accessibility. Keep it under 100 words and "
        "focus on screen reader users."
    ),
    IssueType.EMPTY_LINK: (
        "Explain why links need descriptive text for accessibility. Keep it under 100 words."
    ),
    IssueType.MISSING_HEADINGS: (
        "Explain why proper heading structure (h1, h2, h3, etc.) is important for web "
        "accessibility. Keep it under 100 words."
    ),
    IssueType.IMPROPER_HEADING_STRUCTURE: (
        "Explain why heading levels shouldn't skip numbers (like going from h2 to h4). "
        "Keep it under 100 words."
    ),
    IssueType.MISSING_PAGE_TITLE: (
        "Explain why every web page needs a descriptive title element. Keep it under 100 words."
    ),
    IssueType.MISSING_LANG_ATTRIBUTE: (
        "Explain why the html element needs a lang attribute for accessibility. "
        "Keep it under 100 words."
    ),
    IssueType.LOW_CONTRAST: (
        "Explain why text needs sufficient color contrast against its background (WCAG 1.4.3). "
        "Keep it under 100 words."
    ),
    IssueType.MISSING_SKIP_LINK: (
        "Explain why pages need a 'skip to main content' link for keyboard users. "
        "Keep it under 100 words."
    ),
}


def fallback_enrichment(issue: Issue) -> Enrichment:
    """Default text used whenever the model cannot supply an explanation."""
    return Enrichment(explanation=FALLBACK_EXPLANATION, fixed_code=issue.element)


def _client(config: EnrichmentConfig) -> Optional[Any]:
    """Return OpenAI-compatible client for Together.ai, or None if no key is configured."""
    if not config.api_key:
        return None
    return OpenAI(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.timeout,
        max_retries=0,
    )


class EnrichmentService:
    """Attaches model-written explanations and fixes to detected issues."""

    def __init__(self, config: EnrichmentConfig, client: Optional[Any] = None):
        self.config = config
        self.client = client if client is not None else _client(config)
        self._builders: Dict[IssueType, Callable[[Issue, str], Enrichment]] = {
            IssueType.MISSING_ALT_TEXT: self._alt_text,
            IssueType.MISSING_FORM_LABEL: self._form_label,
            IssueType.EMPTY_LINK: self._link_text,
            IssueType.MISSING_HEADINGS: self._canned(fixes.HEADING_SKELETON),
            IssueType.IMPROPER_HEADING_STRUCTURE: self._heading_level,
            IssueType.MISSING_PAGE_TITLE: self._canned(fixes.PAGE_TITLE_FIX),
            IssueType.MISSING_LANG_ATTRIBUTE: self._canned(fixes.LANG_FIX),
            IssueType.LOW_CONTRAST: self._canned(fixes.CONTRAST_FIX),
            IssueType.MISSING_SKIP_LINK: self._canned(fixes.SKIP_LINK_FIX),
        }

    @property
    def available(self) -> bool:
        return self.client is not None

    def _complete(self, prompt: str, max_tokens: int) -> Optional[str]:
        """One chat completion. None on API failure or empty content."""
        try:
            r = self.client.chat.completions.create(
                model=self.config.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=self.config.temperature,
                timeout=self.config.timeout,
            )
        except OpenAIError as e:
            logger.warning("Together.ai call failed: %s", e)
            return None
        if r.choices and r.choices[0].message.content:
            return r.choices[0].message.content.strip() or None
        return None

    def enrich(self, issue: Issue) -> Enrichment:
        """Explanation and fix for one issue. Never raises; falls back to default text."""
        if self.client is None:
            return fallback_enrichment(issue)
        try:
            explanation = self._complete(EXPLANATION_PROMPTS[issue.type], EXPLANATION_TOKENS)
            if not explanation:
                logger.warning("No explanation for %s; using fallback", issue.type.value)
                return fallback_enrichment(issue)
            return self._builders[issue.type](issue, explanation)
        except Exception:
            logger.exception("Failed to generate AI content for %s", issue.type.value)
            return fallback_enrichment(issue)

    def enrich_all(self, issues: Sequence[Issue]) -> List[EnrichedIssue]:
        """Enrich every issue with at most ``config.concurrency`` calls in flight.
        Output order matches input order."""
        if not issues:
            return []
        workers = max(1, min(self.config.concurrency, len(issues)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="enrich") as pool:
            enrichments = list(pool.map(self.enrich, issues))
        return [EnrichedIssue(issue=i, enrichment=e) for i, e in zip(issues, enrichments)]

    # --- per-type builders ---

    def _alt_text(self, issue: Issue, explanation: str) -> Enrichment:
        src = issue.details.src
        subject = f'an image with src="{src}"' if src else "an image (no src)"
        suggestion = self._complete(
            f"Generate descriptive alt text for {subject}. "
            "The alt text should be concise (under 125 characters) and describe what the image "
            "shows. Only return the alt text, nothing else.",
            ALT_TEXT_TOKENS,
        )
        return Enrichment(
            explanation=explanation,
            suggested_alt_text=suggestion,
            fixed_code=fixes.with_alt_text(issue.element, suggestion or fixes.DEFAULT_ALT_TEXT),
        )

    def _form_label(self, issue: Issue, explanation: str) -> Enrichment:
        field = issue.details
        suggestion = self._complete(
            f'Generate a clear, descriptive label for a form input of type "{field.input_type}" '
            f'with name "{field.input_name}". Only return the label text, nothing else.',
            LABEL_TOKENS,
        )
        field_id = field.input_id or fixes.field_id_for(issue.element, field.input_name)
        return Enrichment(
            explanation=explanation,
            suggested_label=suggestion,
            fixed_code=fixes.with_label(issue.element, suggestion or fixes.DEFAULT_LABEL, field_id),
        )

    def _link_text(self, issue: Issue, explanation: str) -> Enrichment:
        suggestion = self._complete(
            f'Generate descriptive link text for a link with href="{issue.details.href}". '
            "The text should clearly indicate where the link goes. Only return the link text, "
            "nothing else.",
            LINK_TEXT_TOKENS,
        )
        return Enrichment(
            explanation=explanation,
            suggested_text=suggestion,
            fixed_code=fixes.with_link_text(issue.element, suggestion or fixes.DEFAULT_LINK_TEXT),
        )

    def _heading_level(self, issue: Issue, explanation: str) -> Enrichment:
        return Enrichment(
            explanation=explanation,
            fixed_code=fixes.with_heading_level(issue.element, issue.details.previous_level + 1),
        )

    @staticmethod
    def _canned(fixed_code: str) -> Callable[[Issue, str], Enrichment]:
        def build(issue: Issue, explanation: str) -> Enrichment:
            return Enrichment(explanation=explanation, fixed_code=fixed_code)
        return build
