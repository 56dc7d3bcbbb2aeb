"""Deterministic, input-driven transforms applied to fixture payloads.

Pure functions over plain dicts. Same input always yields the same output, so
mocked responses differ per input without becoming nondeterministic.
"""

import hashlib
import re

from ideamock.schemas.mock import OperationName

SCORE_MIN = 0
SCORE_MAX = 100

# Input fragment substituted into summaries
SNIPPET_LENGTH = 50

# Jitter applied to scores when variability is enabled: offset in [-spread, spread]
ANALYSIS_SCORE_SPREAD = 5
FRANKENSTEIN_SCORE_SPREAD = 3

# Hex digits of the input digest carried as input_fingerprint
FINGERPRINT_LENGTH = 16

# (operation, locale) -> (summary lead pattern, replacement template)
SUMMARY_LEADS: dict[tuple[OperationName, str], tuple[str, str]] = {
    (OperationName.ANALYZER, "en"): (r"^This .*? concept", 'This "{snippet}" concept'),
    (OperationName.ANALYZER, "es"): (r"^Este concepto de .*? muestra", 'Este concepto de "{snippet}" muestra'),
    (OperationName.HACKATHON, "en"): (r"^This .*? project", 'This "{snippet}" project'),
    (OperationName.HACKATHON, "es"): (r"^Este proyecto de .*? muestra", 'Este proyecto "{snippet}" muestra'),
}

TITLE_SUFFIXES = {
    "en": {2: "Fusion Platform", 3: "Integration Hub", 4: "Ecosystem"},
    "es": {2: "Fusión", 3: "Hub de Integración", 4: "Ecosistema"},
}

# Metric deltas by element count (4 means "4 or more")
ELEMENT_COUNT_DELTAS = {
    2: {"originality_score": 5, "feasibility_score": 5},
    3: {"originality_score": 10, "feasibility_score": -3},
    4: {"originality_score": 15, "wow_factor": 10, "feasibility_score": -8},
}

MODE_DELTAS = {
    "aws": {"scalability_score": 12, "feasibility_score": 5},
    "companies": {"impact_score": 8, "wow_factor": 5},
}

# Generic stack tokens and the AWS services that replace them in aws mode
AWS_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("React", "AWS Amplify"),
    ("Node.js", "AWS Lambda"),
    ("PostgreSQL", "Amazon Aurora"),
    ("Redis", "Amazon ElastiCache"),
    ("Docker", "Amazon ECS"),
)

AWS_STACK_PREFIX = "AWS-native architecture: "

AWS_GROWTH_LEADS = {
    "en": "Leverage AWS global infrastructure for rapid scaling. ",
    "es": "Aprovechar la infraestructura global de AWS para escalar rápidamente. ",
}

COMPANIES_VALUE_LEADS = {
    "en": "Combines the best of {first} and {second}: ",
    "es": "Combina lo mejor de {first} y {second}: ",
}

ELEMENT_DESCRIPTION_TAILS = {
    "en": " Built from {names}.",
    "es": " Construida a partir de {names}.",
}


def clamp_score(value: float) -> int:
    return int(max(SCORE_MIN, min(SCORE_MAX, round(value))))


def input_snippet(text: str) -> str:
    """First non-empty line of text, truncated with an ellipsis."""
    first_line = next((line.strip() for line in text.splitlines() if line.strip()), "")
    if len(first_line) > SNIPPET_LENGTH:
        return first_line[:SNIPPET_LENGTH].rstrip() + "..."
    return first_line


def input_fingerprint(text: str) -> str:
    """Short sha256 tag of the whole input, distinct for inputs sharing a snippet."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:FINGERPRINT_LENGTH]


def score_offsets(text: str, count: int, spread: int) -> list[int]:
    """Stable per-position offsets in [-spread, spread] derived from input length and digest."""
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    width = 2 * spread + 1
    return [(len(text) + digest[i % len(digest)]) % width - spread for i in range(count)]


def substitute_summary_lead(summary: str, operation: OperationName, locale: str, snippet: str) -> str:
    lead = SUMMARY_LEADS.get((operation, locale))
    if lead is not None:
        pattern, template = lead
        replacement = template.format(snippet=snippet)
        updated, count = re.subn(pattern, lambda _: replacement, summary, count=1)
        if count:
            return updated
    return f'"{snippet}": {summary}'


def apply_analysis_customization(
    payload: dict,
    operation: OperationName,
    locale: str,
    input_text: str,
    enable_variability: bool,
) -> dict:
    """Customize an idea or hackathon analysis payload in place and return it."""
    snippet = input_snippet(input_text)
    if snippet:
        payload["detailed_summary"] = substitute_summary_lead(
            payload["detailed_summary"], operation, locale, snippet
        )

    if not enable_variability:
        return payload

    rubric = payload["scoring_rubric"]
    offsets = score_offsets(input_text, len(rubric) + 1, ANALYSIS_SCORE_SPREAD)
    payload["final_score"] = clamp_score(payload["final_score"] + offsets[0])
    for item, offset in zip(rubric, offsets[1:]):
        item["score"] = clamp_score(item["score"] + offset)
    payload["input_fingerprint"] = input_fingerprint(input_text)
    return payload


def frankenstein_title(names: list[str], language: str) -> str:
    suffixes = TITLE_SUFFIXES.get(language, TITLE_SUFFIXES["en"])
    return f"{' + '.join(names)} {suffixes[min(len(names), 4)]}"


def substitute_aws_stack(tech_stack: str) -> str:
    """Replace generic stack tokens with named AWS services."""
    replaced = 0
    for token, service in AWS_SUBSTITUTIONS:
        tech_stack, count = re.subn(
            rf"\b{re.escape(token)}\b", service, tech_stack, flags=re.IGNORECASE
        )
        replaced += count

    if not replaced and "AWS" not in tech_stack:
        tech_stack = AWS_STACK_PREFIX + tech_stack
    return tech_stack


def apply_frankenstein_customization(
    payload: dict,
    names: list[str],
    mode: str,
    language: str,
    enable_variability: bool,
) -> dict:
    """Customize a Frankenstein idea payload in place and return it."""
    payload["idea_title"] = frankenstein_title(names, language)
    payload["idea_description"] += ELEMENT_DESCRIPTION_TAILS[language].format(names=", ".join(names))
    payload["language"] = language

    deltas: dict[str, int] = {}
    for source in (ELEMENT_COUNT_DELTAS[min(len(names), 4)], MODE_DELTAS[mode]):
        for metric, delta in source.items():
            deltas[metric] = deltas.get(metric, 0) + delta

    if mode == "aws":
        payload["tech_stack_suggestion"] = substitute_aws_stack(payload["tech_stack_suggestion"])
        growth = payload.get("growth_strategy")
        if growth is not None and "AWS" not in growth:
            payload["growth_strategy"] = AWS_GROWTH_LEADS[language] + growth
    elif mode == "companies":
        lead = COMPANIES_VALUE_LEADS[language].format(first=names[0], second=names[1])
        payload["unique_value_proposition"] = lead + payload["unique_value_proposition"]

    metrics = payload["metrics"]
    if enable_variability:
        offsets = score_offsets("|".join(names) + f"|{mode}", len(metrics), FRANKENSTEIN_SCORE_SPREAD)
        for metric, offset in zip(sorted(metrics), offsets):
            deltas[metric] = deltas.get(metric, 0) + offset

    for metric, delta in deltas.items():
        metrics[metric] = clamp_score(metrics[metric] + delta)
    return payload
