import re

from profile_css.config import ValidationRules
from profile_css.models import Severity, ValidationIssue

_FIXED_POSITION = re.compile(r"position:\s*fixed")
_Z_INDEX = re.compile(r"z-index:\s*(\d+)")


def _audit_scoping_prefix(css: str, rules: ValidationRules) -> list[ValidationIssue]:
    count = css.count(rules.scoping_prefix)
    if not count:
        return []
    return [
        ValidationIssue(
            severity=Severity.WARNING,
            message=f"Found {count} instances of '{rules.scoping_prefix}' prefix",
        )
    ]


def _audit_protected_selectors(css: str, rules: ValidationRules) -> list[ValidationIssue]:
    return [
        ValidationIssue(severity=Severity.ERROR, message=f"Found protected selector: {selector}")
        for selector in rules.protected_selectors
        if selector in css
    ]


def _audit_fixed_position(css: str, rules: ValidationRules) -> list[ValidationIssue]:
    count = len(_FIXED_POSITION.findall(css))
    if not count:
        return []
    return [ValidationIssue(severity=Severity.ERROR, message=f"Found {count} instances of 'position: fixed'")]


def _audit_z_index(css: str, rules: ValidationRules) -> list[ValidationIssue]:
    issues = []
    for match in _Z_INDEX.finditer(css):
        value = int(match.group(1))
        if value > rules.max_z_index:
            issues.append(
                ValidationIssue(
                    severity=Severity.ERROR,
                    message=f"z-index value {value} exceeds maximum of {rules.max_z_index}",
                )
            )
    return issues


_AUDITS = (
    _audit_scoping_prefix,
    _audit_protected_selectors,
    _audit_fixed_position,
    _audit_z_index,
)


def validate(css: str, rules: ValidationRules | None = None) -> list[ValidationIssue]:
    """Run every audit over ``css``; issues come back in audit order, then match order."""
    rules = rules or ValidationRules()
    issues: list[ValidationIssue] = []
    for audit in _AUDITS:
        issues.extend(audit(css, rules))
    return issues
