"""GitHub issue and inline comment templates for review results."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from danger_report.schema import DangerResults, Violation, is_inline

logger = logging.getLogger(__name__)

FAIL_EMOJI = "no_entry_sign"
WARNING_EMOJI = "warning"
MESSAGE_EMOJI = "book"
SUMMARY_MESSAGE_LIMIT = 20
MARKDOWN_PATTERN = re.compile(r"[`*_~\[]+")

MESSAGE_FOR_RESULT_WITH_ISSUES = "Found some issues. Don't worry, everything is fixable."
"""Status text for callers updating a pull request when issues are found."""


def contains_markdown(message: str) -> bool:
    """Return True when the message holds characters markdown would interpret."""
    return MARKDOWN_PATTERN.search(message) is not None


def no_violations_or_all_empty(violations: Sequence[Violation]) -> bool:
    """Return True when there is nothing to show in a table."""
    return len(violations) == 0 or all(not violation.message for violation in violations)


def truncate(message: str, count: int) -> str:
    """Shorten a message to `count` characters, ending in an ellipsis.

    Messages shorter than `count` are returned unchanged.
    """
    if not message:
        return message
    if len(message) < count:
        return message
    return message[: count - 3] + "..."


def _emoji_string(default_emoji: str) -> str:
    return f":{default_emoji}:"


def _html_for_violation(default_emoji: str, violation: Violation) -> str:
    if is_inline(violation):
        message = f"**{violation.file}#L{violation.line}** - {violation.message}"
    else:
        message = violation.message

    if contains_markdown(message):
        message = f"\n\n  {message}\n  "

    return (
        "<tr>\n"
        f"      <td>{violation.icon or _emoji_string(default_emoji)}</td>\n"
        f"      <td>{message}</td>\n"
        "    </tr>\n"
        "  "
    )


def _table(name: str, default_emoji: str, violations: Sequence[Violation]) -> str:
    """Render violations as an HTML table, or an empty string when there are none."""
    if no_violations_or_all_empty(violations):
        return ""
    rows = "\n".join(_html_for_violation(default_emoji, violation) for violation in violations)
    return (
        "\n"
        "<table>\n"
        "  <thead>\n"
        "    <tr>\n"
        '      <th width="50"></th>\n'
        f'      <th width="100%" data-danger-table="true">{name}</th>\n'
        "    </tr>\n"
        "  </thead>\n"
        f"  <tbody>{rows}</tbody>\n"
        "</table>\n"
    )


def _summary_line(label: str, violations: Sequence[Violation]) -> str:
    """Build `"<N> <label>: "` followed by each truncated message."""
    summary = f"{len(violations)} {label}: "
    last_index = len(violations) - 1
    for index, violation in enumerate(violations):
        separator = "" if index == last_index else ","
        summary = f"{summary} {truncate(violation.message, SUMMARY_MESSAGE_LIMIT)}{separator}"
    return summary


def _build_summary_message(danger_id: str, results: DangerResults) -> str:
    messages_line = f"{len(results.messages)} messages" if results.messages else ""
    markdowns_line = f"{len(results.markdowns)} markdown notices" if results.markdowns else ""
    return "\n".join(
        [
            f"  {_summary_line('failure', results.fails)}",
            f"  {_summary_line('warning', results.warnings)}",
            f"  {messages_line}",
            f"  {markdowns_line}",
            f"  {danger_id_to_string(danger_id)}",
        ]
    )


def _join_markdowns(markdowns: Sequence[Violation]) -> str:
    return "\n\n".join(violation.message for violation in markdowns)


def danger_id_to_string(danger_id: str) -> str:
    """Hidden marker used to find and update an existing comment."""
    return f"DangerID: danger-id-{danger_id};"


def file_line_to_string(file: str, line: int) -> str:
    """Hidden marker that anchors an inline comment to a location."""
    return f"  File: {file};\n  Line: {line};"


def danger_signature(results: DangerResults) -> str:
    """Link back to the runtime that produced the results."""
    meta = results.resolved_meta()
    return f'Generated by :no_entry_sign: <a href="{meta.runtime_href}">{meta.runtime_name}</a>'


def danger_signature_postfix(results: DangerResults, commit_ref: str | None = None) -> str:
    """Signature attached to a comment, optionally naming the reviewed commit."""
    signature = danger_signature(results)
    if commit_ref is not None:
        signature = f"{signature} against {commit_ref}"
    return signature


def render_issue_body(
    danger_id: str,
    results: DangerResults,
    commit_ref: str | None = None,
) -> str:
    """Render the full issue comment body with HTML tables and a signature."""
    logger.debug(
        "Rendering issue body danger_id=%s fails=%d warnings=%d messages=%d markdowns=%d",
        danger_id,
        len(results.fails),
        len(results.warnings),
        len(results.messages),
        len(results.markdowns),
    )
    return "\n".join(
        [
            "",
            "<!--",
            _build_summary_message(danger_id, results),
            "-->",
            _table("Fails", FAIL_EMOJI, results.fails),
            _table("Warnings", WARNING_EMOJI, results.warnings),
            _table("Messages", MESSAGE_EMOJI, results.messages),
            _join_markdowns(results.markdowns),
            '<p align="right">',
            f"  {danger_signature_postfix(results, commit_ref)}",
            "</p>",
            "",
        ]
    )


def _bullets(default_emoji: str, violations: Sequence[Violation]) -> str:
    emoji_string = _emoji_string(default_emoji)
    return "\n".join(
        f"- {violation.icon or emoji_string} {violation.message}" for violation in violations
    )


def render_inline_body(danger_id: str, results: DangerResults, file: str, line: int) -> str:
    """Render a compact bullet list comment for a single file and line."""
    logger.debug("Rendering inline body danger_id=%s file=%s line=%d", danger_id, file, line)
    return "\n".join(
        [
            "",
            "<!--",
            _build_summary_message(danger_id, results),
            file_line_to_string(file, line),
            "-->",
            _bullets(FAIL_EMOJI, results.fails),
            _bullets(WARNING_EMOJI, results.warnings),
            _bullets(MESSAGE_EMOJI, results.messages),
            _join_markdowns(results.markdowns),
            "  ",
        ]
    )
