"""LangGraph StateGraph definition for the persona discussion and synthesis pipeline."""

import sys
from functools import lru_cache

from langgraph.graph import END, StateGraph

from sitecrew.agents.persona import build_context_header, make_persona_node
from sitecrew.agents.synthesizer import make_synthesis_node
from sitecrew.config import get_config
from sitecrew.personas import PERSONAS, Persona
from sitecrew.state import CrewState, RunResult
from sitecrew.utils.completion import build_completion_service
from sitecrew.utils.validator import validate_goal, validate_references

SYNTHESIS_NODE = "synthesis"


def persona_node_name(persona: Persona) -> str:
    """Graph node name for a persona, kept clear of the CrewState keys."""
    return f"persona_{persona.name.lower()}"


def build_graph(
    service,
    synthesis_service=None,
    personas: tuple[Persona, ...] = PERSONAS,
    persona_max_tokens: int = 300,
    synthesis_max_tokens: int = 8000,
):
    """Compile a linear graph: every persona in order, then the synthesis node.

    Personas are chained one after another because each one reads the
    contributions of all the personas before it.
    """
    workflow = StateGraph(CrewState)

    node_names = []
    for persona in personas:
        name = persona_node_name(persona)
        workflow.add_node(name, make_persona_node(persona, service, persona_max_tokens))
        node_names.append(name)

    workflow.add_node(
        SYNTHESIS_NODE,
        make_synthesis_node(synthesis_service or service, synthesis_max_tokens),
    )
    node_names.append(SYNTHESIS_NODE)

    workflow.set_entry_point(node_names[0])
    for current, following in zip(node_names, node_names[1:]):
        workflow.add_edge(current, following)
    workflow.add_edge(SYNTHESIS_NODE, END)

    return workflow.compile()


class Orchestrator:
    """Runs the crew pipeline against an injected completion service.

    The compiled graph is shared between runs; each run starts from its own
    state dict, so concurrent runs never see each other's transcript.
    """

    def __init__(
        self,
        service,
        synthesis_service=None,
        personas: tuple[Persona, ...] = PERSONAS,
        persona_max_tokens: int = 300,
        synthesis_max_tokens: int = 8000,
    ):
        self.personas = personas
        self._graph = build_graph(
            service,
            synthesis_service=synthesis_service,
            personas=personas,
            persona_max_tokens=persona_max_tokens,
            synthesis_max_tokens=synthesis_max_tokens,
        )

    def run(self, goal: str, references: list[str] | None = None) -> RunResult:
        """Run the full discussion and return the contributions plus the sanitized document.

        Raises ValidationError before any completion call if the request is
        invalid, and PipelineError if any stage fails. No partial result is
        ever returned.
        """
        goal = validate_goal(goal)
        references = validate_references(references)

        print(f"[SiteCrew] Starting website generation for prompt: {goal}", file=sys.stderr)
        if references:
            print(f"[SiteCrew] References provided: {references}", file=sys.stderr)

        state: CrewState = {
            "goal": goal,
            "references": references,
            "discussion": [],
            "context": build_context_header(goal, references),
            "code": "",
        }
        final_state = self._graph.invoke(state)

        print("[SiteCrew] Website generation complete", file=sys.stderr)
        return RunResult(discussion=final_state["discussion"], code=final_state["code"])


def build_orchestrator(config: dict | None = None) -> Orchestrator:
    """Build an Orchestrator wired to the configured completion service."""
    config = config or get_config()
    service = build_completion_service(config, "persona_model")
    synthesis_service = None
    if config.get("synthesis_model", config["persona_model"]) != config["persona_model"]:
        synthesis_service = build_completion_service(config, "synthesis_model")
    return Orchestrator(
        service,
        synthesis_service=synthesis_service,
        persona_max_tokens=config.get("persona_max_tokens", 300),
        synthesis_max_tokens=config.get("synthesis_max_tokens", 8000),
    )


@lru_cache(maxsize=1)
def get_orchestrator() -> Orchestrator:
    """Process-wide orchestrator, built once from config on first use."""
    return build_orchestrator()
