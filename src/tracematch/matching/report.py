from __future__ import annotations

from typing import Dict, Tuple

from .classifier import ScoreReport

# (thousands separator, decimal separator)
LOCALE_SEPARATORS: Dict[str, Tuple[str, str]] = {
    "en-US": (",", "."),
    "pt-BR": (".", ","),
}

RULE = "-" * 38


def format_score(value: float, locale: str = "en-US") -> str:
    """
    Group digits the way ``locale`` does, keeping at most three decimals.
    """
    try:
        thousands, decimal = LOCALE_SEPARATORS[locale]
    except KeyError as exc:
        raise ValueError(f"unsupported locale: {locale}") from exc

    if abs(value) < 0.0005:
        value = 0.0
    integer, _, fraction = f"{value:,.3f}".partition(".")
    fraction = fraction.rstrip("0")
    integer = integer.replace(",", thousands)
    return f"{integer}{decimal}{fraction}" if fraction else integer


def format_report(report: ScoreReport, locale: str = "en-US") -> str:
    """
    Render the per-reference scores and the winner as plain text.
    """
    lines = [f"Diagnosis: {report.label.upper()}", "", "--- TRACE INNER PRODUCT REPORT ---", ""]
    for label, score in report.scores:
        lines.append(f"Reference [{label}]:")
        lines.append(f"   Inner product <U, R> = {format_score(score, locale)}")

    lines.extend(
        [
            "",
            RULE,
            f"WINNER: {report.label}",
            "Criterion: largest projection in matrix space.",
            "Formula: tr(A^t * B) = Σ (A_ij * B_ij)",
        ]
    )
    return "\n".join(lines)


__all__ = ["LOCALE_SEPARATORS", "format_report", "format_score"]
