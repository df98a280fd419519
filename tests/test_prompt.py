from apology_generator.prompt import DEFAULT_PROMPT_TEMPLATE, build_prompt


def test_default_template_states_length_tone_and_content() -> None:
    prompt = build_prompt("I missed our meeting yesterday")

    assert "I missed our meeting yesterday" in prompt
    assert "100-300 words" in prompt
    assert "sincere and professional" in prompt
    assert "take responsibility" in prompt
    assert "solution or way forward" in prompt
    assert "avoiding generic corporate language" in prompt


def test_description_is_trimmed() -> None:
    assert build_prompt("  spilled coffee \n", "[{description}]") == "[spilled coffee]"


def test_braces_in_description_are_kept() -> None:
    assert build_prompt("used {curly} braces", "{description}") == "used {curly} braces"


def test_default_template_has_single_placeholder() -> None:
    assert DEFAULT_PROMPT_TEMPLATE.count("{description}") == 1
