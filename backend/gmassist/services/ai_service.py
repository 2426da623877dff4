# backend/gmassist/services/ai_service.py
import json
import logging
import time
from typing import Any, Dict, List, Optional, Type, TypeVar

from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from gmassist.config import get_settings
from gmassist.models.enums import AIMode, CreatorMode
from gmassist.schemas.ai import (
    EventGenerationContext, NPCGenerationContext, SuggestionContext,
    GeneratedEvent, GeneratedNPC, SuggestionsResponse,
)
from gmassist.services.exceptions import UpstreamError, AIUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

EVENT_TEMPERATURE = {AIMode.CHAOS: 0.8, AIMode.CONTINUITY: 0.4}
NPC_TEMPERATURE = 0.7
SUGGESTION_TEMPERATURE = 0.5

MODE_FOCUS = {
    CreatorMode.ROAD: "survival-focused wasteland travel with resource scarcity, vehicle "
                      "encounters and environmental hazards",
    CreatorMode.CITY: "intrigue-driven settlement politics with faction conflicts, social "
                      "maneuvering and resource control",
}

AI_MODE_FOCUS = {
    AIMode.CHAOS: "Create unpredictable, high-action events that shake up the status quo",
    AIMode.CONTINUITY: "Generate logical events that build on existing narrative threads",
}

EVENT_FORMAT = """Respond with a JSON object:
{
  "name": "short event title",
  "description": "what the GM reads and runs",
  "suggestedNodes": [{"type": "event|npc|faction|location|item", "name": "", "description": "", "properties": {}}],
  "suggestedConnections": [{"fromType": "", "fromName": "", "toType": "", "toName": "",
                            "connectionType": "temporal|spatial|factional|ownership", "reasoning": ""}],
  "estimatedDuration": 30,
  "pacingImpact": "accelerate|slow|tension|resolve",
  "gameplayTips": [""],
  "alternativeOutcomes": [""],
  "requiredPreparation": [""]
}"""

NPC_FORMAT = """Respond with a JSON object:
{
  "name": "", "description": "", "type": "npc",
  "properties": {"faction": "", "motivation": "", "equipment": [""], "secrets": [""],
                 "stats": {"combat": 5}, "relationships": {"name": "relation"}, "backstory": ""}
}"""

SUGGESTION_FORMAT = """Respond with a JSON object:
{"suggestions": [{"query": "", "type": "semantic|related|trending", "relevance": 0.9, "context": ""}]}"""


def _truncate(text: Optional[str], limit: int = 200) -> str:
    if not text:
        return ""
    return text if len(text) <= limit else text[:limit] + "..."


def describe_scenario(scenario: Any, regions: List[Any]) -> str:
    """Prompt block for a stored scenario and its regions."""
    lines = [
        "**Scenario:**",
        f"- Title: {scenario.title}",
        f"- Main idea: {_truncate(scenario.main_idea, 500)}",
    ]
    if scenario.world_context:
        lines.append(f"- World: {_truncate(scenario.world_context, 500)}")
    if scenario.political_situation:
        lines.append(f"- Politics: {_truncate(scenario.political_situation, 500)}")
    if scenario.key_themes:
        lines.append(f"- Themes: {', '.join(scenario.key_themes)}")
    if regions:
        lines.append("**Regions:**")
        for region in regions:
            stance = region.political_stance.value if region.political_stance else "unknown"
            faction = region.controlling_faction or "no faction"
            lines.append(
                f"- {region.name} ({region.type.value}, {faction}, threat {region.threat_level}/5, {stance})"
            )
    return "\n".join(lines)


class AIService:
    """Thin client for the text-generation collaborator.

    Every call asks for a JSON object and validates it against a reply schema.
    Failures are never retried and never replaced with canned content: they
    surface as UpstreamError.
    """

    def __init__(
        self,
        client: Any = None,
        model: str = "gpt-4o-mini",
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
    ):
        if client is None:
            if not api_key:
                raise AIUnavailableError("No OpenAI API key configured")
            client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)
        self.client = client
        self.model = model

    def _complete(
        self, system: str, prompt: str, temperature: float, reply_schema: Type[T], max_tokens: int
    ) -> T:
        start = time.perf_counter()
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_object"},
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            logger.error(f"Text generation request failed: {e}")
            raise UpstreamError(f"Text generation failed: {e}") from e

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"Text generation answered in {elapsed_ms:.0f}ms")

        choices = getattr(response, "choices", None)
        content = choices[0].message.content if choices else None
        if not content:
            raise UpstreamError("Text generation returned an empty reply")

        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            raise UpstreamError(f"Text generation returned invalid JSON: {e}") from e

        try:
            return reply_schema.model_validate(payload)
        except ValidationError as e:
            missing = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise UpstreamError(f"Text generation reply is incomplete: {missing}") from e

    def generate_event(
        self, context: EventGenerationContext, scenario_block: Optional[str] = None
    ) -> GeneratedEvent:
        system = (
            "You are an expert RPG game master assistant for dieselpunk post-apocalyptic settings.\n"
            f"Generate events for {MODE_FOCUS[context.creator_mode]}.\n"
            f"{AI_MODE_FOCUS[context.ai_mode]}.\n"
            "Keep the rust, metal and survival aesthetic, give players meaningful choices "
            "and build on existing story elements. Always answer with valid JSON."
        )

        lines = [
            f"Generate an RPG event for a {'wasteland road' if context.creator_mode == CreatorMode.ROAD else 'settlement/city'} scenario.",
            "",
            "**Session context:**",
            f"- Current phase: {context.current_phase}",
            f"- Creator mode: {context.creator_mode.value}",
            f"- AI mode: {context.ai_mode.value}",
        ]
        for label, value in (
            ("Event type", context.event_type),
            ("Environment", context.environment),
            ("Threat level", context.threat_level),
            ("Time of day", context.time_of_day),
            ("Weather", context.weather),
            ("Player count", context.player_count),
        ):
            if value:
                lines.append(f"- {label}: {value}")

        if context.recent_events:
            lines.append("")
            lines.append("**Recent events (for continuity):**")
            for i, event in enumerate(context.recent_events[-3:], 1):
                lines.append(f"{i}. \"{event.name}\" ({event.phase or 'unknown'}): {_truncate(event.description)}")

        if context.connected_nodes:
            lines.append("")
            lines.append("**Existing story elements:**")
            for node in context.connected_nodes[:10]:
                lines.append(f"- {node.type}: {node.name}: {_truncate(node.description, 100)}")

        if scenario_block:
            lines.append("")
            lines.append(scenario_block)

        lines.append("")
        lines.append(EVENT_FORMAT)

        logger.info(
            f"Generating {context.creator_mode.value} event for phase {context.current_phase} "
            f"({context.ai_mode.value} mode)"
        )
        return self._complete(
            system, "\n".join(lines), EVENT_TEMPERATURE[context.ai_mode], GeneratedEvent, 2000
        )

    def generate_npc(self, context: NPCGenerationContext) -> GeneratedNPC:
        setting = (
            "dangerous wasteland roads with roving gangs, traders and survivors"
            if context.setting == CreatorMode.ROAD
            else "settlements and cities with complex politics, resource control and social hierarchies"
        )
        system = (
            "You are an expert at creating memorable RPG NPCs for post-apocalyptic dieselpunk settings.\n"
            f"Setting: {setting}\n"
            "Give each character a clear motivation, survival concerns and plot hooks. "
            "Always answer with valid JSON."
        )

        lines = [
            f"Generate a wasteland NPC for a {'road encounter' if context.setting == CreatorMode.ROAD else 'settlement'}.",
            "",
            "**Context:**",
        ]
        for label, value in (
            ("Faction", context.faction),
            ("Role", context.role),
            ("Threat level", context.threat_level),
            ("Relationship to the party", context.relationship),
            ("Importance", context.importance.value if context.importance else None),
        ):
            if value:
                lines.append(f"- {label}: {value}")
        lines.append("")
        lines.append(NPC_FORMAT)

        logger.info(f"Generating {context.setting.value} NPC")
        return self._complete(system, "\n".join(lines), NPC_TEMPERATURE, GeneratedNPC, 1500)

    def suggest(
        self, context: SuggestionContext, scenario_block: Optional[str] = None
    ) -> SuggestionsResponse:
        system = (
            "You help game masters search their scenario library. Propose related search "
            "queries for a post-apocalyptic RPG campaign. Always answer with valid JSON."
        )
        lines = [
            f"Suggest up to {context.limit} searches related to: \"{context.query}\"",
        ]
        if context.creator_mode:
            lines.append(f"- Creator mode: {context.creator_mode.value}")
        if scenario_block:
            lines.append("")
            lines.append(scenario_block)
        lines.append("")
        lines.append(SUGGESTION_FORMAT)

        result = self._complete(
            system, "\n".join(lines), SUGGESTION_TEMPERATURE, SuggestionsResponse, 800
        )
        result.suggestions = result.suggestions[:context.limit]
        return result


def get_ai_service() -> AIService:
    """FastAPI dependency. Raises AIUnavailableError when no key is configured."""
    settings = get_settings()
    return AIService(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.openai_timeout_seconds,
    )
