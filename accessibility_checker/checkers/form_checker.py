"""
Form control labelling checks.
"""

from ..checker_base import BaseChecker
from ..document import FORM_FIELD_TAGS, attr, outer_html
from ..issue import FormFieldDetails, IssueType, Severity


class FormLabelChecker(BaseChecker):
    """Checks that form controls have an accessible label."""

    name = "form-labels"

    def _run_checks(self):
        """Run form label checks."""
        for field in self.document.find_all(FORM_FIELD_TAGS):
            if field.name == "input" and (attr(field, "type") or "").strip().lower() == "hidden":
                continue
            if self._is_labelled(field):
                continue
            self._add_issue(
                IssueType.MISSING_FORM_LABEL,
                Severity.HIGH,
                outer_html(field),
                FormFieldDetails(
                    input_type=attr(field, "type") or "text",
                    input_name=attr(field, "name") or "unnamed",
                    input_id=attr(field, "id") or None,
                ),
            )

    def _is_labelled(self, field) -> bool:
        """label[for=id] anywhere in the document, or a non-empty aria-label / aria-labelledby."""
        if self.document.has_label_for(attr(field, "id") or ""):
            return True
        if (attr(field, "aria-label") or "").strip():
            return True
        return bool((attr(field, "aria-labelledby") or "").strip())
