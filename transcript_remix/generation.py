"""
Thin façade over the text-generation provider.

Every task sends the same two-message exchange: a system message with the
task instruction and a user message with a task lead-in followed by the
transcript. The provider returns candidate completions; the first one wins.
"""

import logging

import anthropic

from .errors import GenerationFailed, MissingInput

logger = logging.getLogger(__name__)


class GenerationProvider:
    def complete(self, model, messages, temperature, max_tokens):
        """Return a list of candidate completions (possibly empty)."""
        raise NotImplementedError


class AnthropicProvider(GenerationProvider):
    def __init__(self, api_key):
        self.client = anthropic.Anthropic(api_key=api_key)

    def complete(self, model, messages, temperature, max_tokens):
        system = "\n\n".join(m["content"] for m in messages if m["role"] == "system")
        conversation = [m for m in messages if m["role"] != "system"]

        message = self.client.messages.create(
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
            system=system,
            messages=conversation,
        )
        return [block.text for block in message.content if block.type == "text"]


def _instruction(task, override):
    if isinstance(override, str) and override.strip():
        return override
    return task.default_prompt


def build_messages(task, source_text, instruction=None):
    return [
        {"role": "system", "content": _instruction(task, instruction)},
        {"role": "user", "content": f"{task.lead_in}:\n\n{source_text}"},
    ]


class GenerationService:
    def __init__(self, provider, model):
        self.provider = provider
        self.model = model

    def generate(self, task, source_text, instruction=None):
        if not source_text or not isinstance(source_text, str):
            raise MissingInput()

        messages = build_messages(task, source_text, instruction)
        try:
            candidates = self.provider.complete(
                model=self.model,
                messages=messages,
                temperature=task.temperature,
                max_tokens=task.max_tokens,
            )
        except Exception:
            logger.exception("Error generating %s", task.name)
            raise GenerationFailed(task.failure_message)

        if not candidates:
            logger.warning("Provider returned no candidates for %s", task.name)
            return ""
        return candidates[0] or ""
