from __future__ import annotations

DESCRIPTION_PLACEHOLDER = "{description}"

DEFAULT_PROMPT_TEMPLATE = (
    "Generate a sincere and professional apology letter/email (between 100-300 words) "
    "based on this context: {description}. "
    "The apology should be genuine, take responsibility, and offer a solution or way forward. "
    "Make it personal and empathetic, avoiding generic corporate language."
)


def build_prompt(description: str, template: str = DEFAULT_PROMPT_TEMPLATE) -> str:
    # Plain substitution: user text may contain braces.
    return template.replace(DESCRIPTION_PLACEHOLDER, description.strip())
