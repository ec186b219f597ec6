"""Prompt construction for the four analysis modes.

Every builder is a pure function of the dataset and the caller's input:
identical arguments always produce an identical prompt.  The JSON response
shapes requested here are instructions to the model only; replies are
returned to the client without being parsed.
"""

from __future__ import annotations

from csvinsight.services import sample_formatter
from csvinsight.services.conversation import resolve_context
from csvinsight.services.dataset_store import Dataset

# ---------------------------------------------------------------------------
# Preview sizes per mode
# ---------------------------------------------------------------------------

QUERY_PREVIEW_ROWS = 5
VISUALIZE_PREVIEW_ROWS = 10
CHAT_PREVIEW_ROWS = 8

DEFAULT_ANALYSIS_GOAL = "general analysis"

_ROLE = "You are an expert data analyst."


def _dataset_section(dataset: Dataset) -> list[str]:
    """Lines describing the dataset's shape and columns."""
    table = dataset.table
    return [
        f"Dataset: {dataset.filename}",
        f"Rows: {table.row_count}",
        f"Columns: {table.column_count}",
        f"Column names: {', '.join(table.headers)}",
    ]


# ---------------------------------------------------------------------------
# query
# ---------------------------------------------------------------------------


def build_query_prompt(dataset: Dataset, question: str) -> str:
    """Prompt answering a single ad-hoc *question* about the dataset."""
    parts: list[str] = []
    parts.append(f"{_ROLE} Answer the user's question about the CSV dataset below.")
    parts.append("")
    parts.extend(_dataset_section(dataset))
    parts.append("")
    parts.append(f"Sample data (first {QUERY_PREVIEW_ROWS} rows):")
    parts.append(sample_formatter.sample(dataset.table, QUERY_PREVIEW_ROWS))
    parts.append(f"Question: {question}")
    parts.append("")
    parts.append("Respond with a JSON object of this shape:")
    parts.append("{")
    parts.append('  "question": "the question being answered",')
    parts.append('  "answer": "a clear, direct answer",')
    parts.append('  "calculations": "any calculations performed (optional)",')
    parts.append('  "insights": ["additional observation", "..."],')
    parts.append('  "visualization": "a suggested chart for this answer (optional)"')
    parts.append("}")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# insights
# ---------------------------------------------------------------------------


def build_insights_prompt(dataset: Dataset) -> str:
    """Prompt requesting a full analysis of the dataset (up to 100 rows shown)."""
    parts: list[str] = []
    parts.append(f"{_ROLE} Analyze the CSV dataset below and report your insights.")
    parts.append("")
    parts.extend(_dataset_section(dataset))
    parts.append("")
    parts.append("Data:")
    parts.append(sample_formatter.full(dataset.table))
    parts.append("Cover data quality, patterns, trends, outliers and relationships between columns.")
    parts.append("")
    parts.append("Respond with a JSON object of this shape:")
    parts.append("{")
    parts.append('  "summary": "a short overview of the dataset",')
    parts.append('  "keyFindings": ["finding", "..."],')
    parts.append('  "columnInsights": [{"column": "name", "insight": "observation"}],')
    parts.append('  "recommendations": ["recommended next step", "..."]')
    parts.append("}")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# visualize
# ---------------------------------------------------------------------------


def build_visualize_prompt(dataset: Dataset, analysis_goal: str | None = None) -> str:
    """Prompt asking for chart suggestions toward *analysis_goal*."""
    goal = analysis_goal or DEFAULT_ANALYSIS_GOAL
    parts: list[str] = []
    parts.append(f"{_ROLE} Suggest charts that would best visualize the CSV dataset below.")
    parts.append("")
    parts.extend(_dataset_section(dataset))
    parts.append("")
    parts.append(f"Sample data (first {VISUALIZE_PREVIEW_ROWS} rows):")
    parts.append(sample_formatter.sample(dataset.table, VISUALIZE_PREVIEW_ROWS))
    parts.append(f"Analysis goal: {goal}")
    parts.append("")
    parts.append("Respond with a JSON array of chart suggestions, each of this shape:")
    parts.append("[")
    parts.append("  {")
    parts.append('    "type": "bar | line | scatter | pie | histogram | heatmap",')
    parts.append('    "title": "chart title",')
    parts.append('    "xAxis": "column for the x axis",')
    parts.append('    "yAxis": "column for the y axis",')
    parts.append('    "description": "what the chart reveals",')
    parts.append('    "reasoning": "why this chart suits the goal"')
    parts.append("  }")
    parts.append("]")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# chat
# ---------------------------------------------------------------------------


def build_chat_prompt(dataset: Dataset, message: str, context: str | None = None) -> str:
    """Prompt for one conversational turn.

    The prior transcript opens the prompt verbatim; when *context* is empty
    the start-of-conversation sentinel is used instead.
    """
    parts: list[str] = []
    parts.append(resolve_context(context))
    parts.append("")
    parts.append(f"{_ROLE} Continue the conversation above about the CSV dataset below.")
    parts.append("")
    parts.extend(_dataset_section(dataset))
    parts.append("")
    parts.append(f"Sample data (first {CHAT_PREVIEW_ROWS} rows):")
    parts.append(sample_formatter.sample(dataset.table, CHAT_PREVIEW_ROWS))
    parts.append(f"User: {message}")
    parts.append("")
    parts.append("Respond with a JSON object of this shape:")
    parts.append("{")
    parts.append('  "answer": "your reply to the user",')
    parts.append('  "reasoning": "how you arrived at the answer",')
    parts.append('  "sqlQuery": "an equivalent SQL query, if one applies (optional)",')
    parts.append('  "data": "supporting rows or figures (optional)"')
    parts.append("}")
    return "\n".join(parts)
