"""
Wizard Duel — Narrator
Turns a finished duel's payload into a short dramatic retelling via the
OpenAI chat API.

CONTRACT: the narrator is a storyteller, NOT a referee.
- It reads outcomes from the narrator payload (battle_log.to_narrator_payload)
- It never changes the winner, damage values, or any battle state
- The BattleController is never passed to this module
"""

from __future__ import annotations
import json
import logging
import os
import re
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from openai import OpenAI

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


NARRATOR_SYSTEM_PROMPT = """You are the Chronicler of the Arcane Arena, where two wizards duel with spell cards until one falls.

## Your Cardinal Rules

1. **Never alter outcomes.** The winner, every damage number and every status effect in `events` already happened. You retell them; you do not invent or change them.
2. **Follow the events in order.** `events` is the battle log, oldest first.
3. **Make spells feel distinct.** Fireball and Meteor scorch, Ice Blast freezes, Poison Cloud chokes, Curse withers, Shield shimmers and shatters, Drain steals life.
4. **Name both wizards** as they appear in `player` and `enemy`.
5. **End with the outcome.** If `winner` is null, the duel is unfinished: end on suspense.

## Output Format

Return a JSON object with exactly these fields:

{
  "narration": "string, the retelling in 120-200 words",
  "title": "string, 3-6 evocative words",
  "key_moment": "string, one sentence naming the turning point",
  "tone": "string, one of: 'tense', 'devastating', 'triumphant', 'chaotic', 'grim'"
}

Return only valid JSON. No preamble, no markdown fences.
"""


@dataclass
class DuelNarration:
    narration: str
    title: str
    key_moment: str
    tone: str
    raw_payload: dict   # The payload that produced this narration

    def display(self):
        """Pretty-print for the simulator."""
        divider = "─" * 60
        print(f"\n{divider}")
        print(f"⚔  {self.title.upper()}")
        print(divider)
        print(f"\n{self.narration}\n")
        print(f"📍 Key Moment: {self.key_moment}")
        print(f"🎭 Tone: {self.tone}")
        print(divider)


def parse_narration(raw_text: str) -> dict:
    """Parse the model's JSON reply, tolerating stray text around the object."""
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError:
        match = re.search(r"\{.*\}", raw_text, re.DOTALL)
        if match:
            return json.loads(match.group())
        raise ValueError(f"Narrator returned unparseable response:\n{raw_text}") from None


def narrate_duel(
    payload: dict,
    api_key: Optional[str] = None,
    model: str = "gpt-4o",
    client: Optional[OpenAI] = None,
) -> DuelNarration:
    """
    Ask the narrator to retell a duel.

    Args:
        payload: The dict produced by battle_log.to_narrator_payload()
        api_key: OpenAI API key. Falls back to OPENAI_API_KEY env var.
        model: OpenAI model to use.
        client: Pre-built OpenAI client (mainly for tests).
    """
    client = client or OpenAI(api_key=api_key or os.environ.get("OPENAI_API_KEY"))

    user_message = f"""Narrate this wizard duel:

{json.dumps(payload, indent=2)}"""

    logger.info("Requesting narration from %s (%d events)", model, len(payload.get("events", [])))
    response = client.chat.completions.create(
        model=model,
        max_tokens=1024,
        response_format={"type": "json_object"},
        messages=[
            {"role": "system", "content": NARRATOR_SYSTEM_PROMPT},
            {"role": "user", "content": user_message},
        ],
    )

    parsed = parse_narration(response.choices[0].message.content.strip())
    return DuelNarration(
        narration=parsed["narration"],
        title=parsed["title"],
        key_moment=parsed["key_moment"],
        tone=parsed["tone"],
        raw_payload=payload,
    )
