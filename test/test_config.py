from __future__ import annotations
import pytest
from conch.config import MULTILINE_PREFIX, MULTILINE_SUFFIX, SEPARATOR, PromptConfig
from conch.prompt import Prompt


@pytest.mark.parametrize(
    "env,config",
    [
        ({}, PromptConfig(plain=False, multiline=True)),
        ({"CONCH_PLAIN": "1"}, PromptConfig(plain=True, multiline=True)),
        ({"CONCH_PLAIN": "true"}, PromptConfig(plain=True, multiline=True)),
        ({"CONCH_PLAIN": "yes"}, PromptConfig(plain=False, multiline=True)),
        ({"CONCH_PLAIN": "0"}, PromptConfig(plain=False, multiline=True)),
        ({"CONCH_MULTILINE": "0"}, PromptConfig(plain=False, multiline=False)),
        ({"CONCH_MULTILINE": "false"}, PromptConfig(plain=False, multiline=False)),
        ({"CONCH_MULTILINE": "no"}, PromptConfig(plain=False, multiline=True)),
        ({"CONCH_MULTILINE": ""}, PromptConfig(plain=False, multiline=True)),
        (
            {"CONCH_PLAIN": "1", "CONCH_MULTILINE": "1"},
            PromptConfig(plain=True, multiline=True),
        ),
    ],
)
def test_from_env(env: dict[str, str], config: PromptConfig) -> None:
    assert PromptConfig.from_env(env) == config


@pytest.mark.parametrize(
    "config,prompt",
    [
        (PromptConfig(plain=True), Prompt()),
        (PromptConfig(plain=True, multiline=False), Prompt()),
        (
            PromptConfig(multiline=True),
            Prompt(
                separator=SEPARATOR, prefix=MULTILINE_PREFIX, suffix=MULTILINE_SUFFIX
            ),
        ),
        (PromptConfig(multiline=False), Prompt(separator=SEPARATOR)),
    ],
)
def test_new_prompt(config: PromptConfig, prompt: Prompt) -> None:
    assert config.new_prompt() == prompt
