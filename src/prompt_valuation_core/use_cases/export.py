"""
Report Export

Flattens valuation reports into a pandas DataFrame for CSV output.
"""

import pandas as pd

from prompt_valuation_core.domain.entities import ValuationReport, to_plain


def report_to_row(report: ValuationReport) -> dict:
    """
    Flatten one report into a single row

    Calculation fields are prefixed with "calc_", judgment sub-scores with
    "judge_"; nested dicts (PVC normalized scores) are expanded one level.
    """
    row = {
        "method": report.method,
        "watermark": report.watermark,
        "timestamp": report.timestamp,
        "prompt_title": report.prompt_title,
    }
    for name, value in to_plain(report.calculations).items():
        if isinstance(value, dict):
            for sub_name, sub_value in value.items():
                row[f"calc_{name}_{sub_name}"] = sub_value
        else:
            row[f"calc_{name}"] = value
    if report.judgment is not None:
        for name, value in report.judgment.scores.items():
            row[f"judge_{name}"] = value
        row["judge_rationale"] = report.judgment.rationale
    row["badges"] = ",".join(badge.id for badge in report.badges)
    return row


def reports_to_frame(reports: list[ValuationReport]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per report

    Columns that do not apply to a report's method are left empty (NaN).
    """
    return pd.DataFrame([report_to_row(r) for r in reports])
