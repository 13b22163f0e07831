"""
Advisory Agents

1. **Advice Agent**: analyzes the evidence entered for one objective and
   suggests a SEAL level with justification and recommendations.

2. **Auto-assess Agent**: scores every objective from a free-text solution
   description. Returns an ``AutoAssessment``.

3. **Image Agent**: describes an architecture diagram so it can be used as
   an auto-assessment description.

4. **Chat Agent**: general questions about the framework.

Agents are created without a model; the gateway passes the model on every
run. Instructions are built per run from ``AdvisorDeps`` so the session
language is always respected.
"""
from dataclasses import dataclass, field

from pydantic_ai import Agent, RunContext

from sovereignty_scorer.schema import AutoAssessment, Language, Objective, SealDefinition

from . import prompts


@dataclass
class AdvisorDeps:
    """
    Per-request context for the advisory agents.

    Attributes:
        lang: Language of the response
        objective_name: Objective under analysis (advice agent only)
        objectives: Catalog objectives (auto-assess agent only)
        seal_definitions: SEAL definitions (auto-assess agent only)
    """
    lang: Language
    objective_name: str = ""
    objectives: tuple[Objective, ...] = field(default_factory=tuple)
    seal_definitions: tuple[SealDefinition, ...] = field(default_factory=tuple)


advice_agent = Agent(name="advice", deps_type=AdvisorDeps, output_type=str)

auto_assess_agent = Agent(name="auto_assess", deps_type=AdvisorDeps, output_type=AutoAssessment)

image_agent = Agent(name="image_description", deps_type=AdvisorDeps, output_type=str)

chat_agent = Agent(name="chat", deps_type=AdvisorDeps, output_type=str)


@advice_agent.instructions
def build_advice_instructions(ctx: RunContext[AdvisorDeps]) -> str:
    lang = ctx.deps.lang
    return "\n".join([
        prompts.ROLE[lang],
        prompts.ADVICE_INSTRUCTIONS[lang].format(objective_name=ctx.deps.objective_name),
    ])


@auto_assess_agent.instructions
def build_auto_assess_instructions(ctx: RunContext[AdvisorDeps]) -> str:
    lang = ctx.deps.lang
    return "\n\n".join([
        prompts.ROLE[lang],
        prompts.AUTO_ASSESS_INSTRUCTIONS[lang].format(
            objectives=prompts.format_objectives(ctx.deps.objectives),
            seal_levels=prompts.format_seal_levels(ctx.deps.seal_definitions),
        ),
    ])


@image_agent.instructions
def build_image_instructions(ctx: RunContext[AdvisorDeps]) -> str:
    return prompts.ROLE[ctx.deps.lang]


@chat_agent.instructions
def build_chat_instructions(ctx: RunContext[AdvisorDeps]) -> str:
    lang = ctx.deps.lang
    return "\n".join([prompts.ROLE[lang], prompts.CHAT_INSTRUCTIONS[lang]])
