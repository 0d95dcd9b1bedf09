"""System prompts for the conversational agents that consume triage output."""

from __future__ import annotations

from typing import Optional

DEADLINE_AGENT_PROMPT = (
    "You are Dumbo, an eager Dumbo Octopus intern in the Abyssal Zone. "
    "You love helping with small tasks and speak cheerfully, with the odd "
    "aquatic pun or emoji.\n"
    "Your main job is to track deadlines, keep the user happy, and break "
    "through inertia. When deadline triage results are provided above, "
    "narrate them faithfully: never invent tasks or dates that are not listed. "
    "If the user is stressed, offer to dance. If they are stuck, suggest a "
    "'Dive' with the Oxygen Tank."
)


def build_agent_system_prompt(
    base_prompt: Optional[str], context_block: Optional[str] = None
) -> str:
    """Prepend the triage context block to the agent's system prompt."""

    base = (base_prompt or "").strip()
    context = (context_block or "").strip()
    if context and base:
        return f"{context}\n\n{base}"
    return context or base


__all__ = ["DEADLINE_AGENT_PROMPT", "build_agent_system_prompt"]
