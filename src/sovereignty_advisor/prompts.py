"""
Localized prompt templates for the advisory agents.

Templates are plain ``str.format`` strings keyed by language. Every agent
acts as an expert in the European Commission's Cloud Sovereignty Framework
and answers in the language of the session.
"""
from typing import Sequence

from sovereignty_scorer.schema import Language, Objective, SealDefinition


ROLE = {
    Language.EN: (
        "Act as an expert in the European Commission's Cloud Sovereignty Framework. "
        "Provide your response in ENGLISH."
    ),
    Language.ES: (
        "Actúa como un experto en el Marco de Soberanía Cloud de la Comisión Europea. "
        "Proporciona tu respuesta en ESPAÑOL."
    ),
}

ADVICE_INSTRUCTIONS = {
    Language.EN: 'Analyze the provided evidence for the objective "{objective_name}".',
    Language.ES: 'Analiza la evidencia proporcionada para el objetivo "{objective_name}".',
}

ADVICE_PROMPT = {
    Language.EN: """\
Critical factors to consider:
{factors}

Provider's description of evidence:
"{evidence}"

Please provide your expert analysis including:
1. A suggested SEAL level (0-4).
2. Detailed justification based on the contributing factors and European regulations.
3. Specific recommendations to improve the sovereignty level in this area.""",
    Language.ES: """\
Factores críticos a considerar:
{factors}

Descripción de la evidencia del proveedor:
"{evidence}"

Por favor proporciona tu análisis experto incluyendo:
1. Un nivel SEAL sugerido (0-4).
2. Justificación detallada basada en los factores contribuyentes y la normativa europea.
3. Recomendaciones específicas para mejorar el nivel de soberanía en esta área.""",
}

AUTO_ASSESS_INSTRUCTIONS = {
    Language.EN: """\
Assess the cloud solution described by the user against every sovereignty objective below.
For each objective return its id, a SEAL level from 0 to 4 and a short justification.

Objectives:
{objectives}

SEAL levels:
{seal_levels}""",
    Language.ES: """\
Evalúa la solución cloud descrita por el usuario frente a cada objetivo de soberanía.
Para cada objetivo devuelve su id, un nivel SEAL de 0 a 4 y una justificación breve.

Objetivos:
{objectives}

Niveles SEAL:
{seal_levels}""",
}

IMAGE_PROMPT = {
    Language.EN: (
        "Describe this cloud architecture diagram for a sovereignty assessment. "
        "Identify the providers, hosting regions and jurisdictions, data flows, "
        "encryption and key management, and any dependency on non-EU services."
    ),
    Language.ES: (
        "Describe este diagrama de arquitectura cloud para una evaluación de soberanía. "
        "Identifica los proveedores, regiones y jurisdicciones de alojamiento, flujos de datos, "
        "cifrado y gestión de claves, y cualquier dependencia de servicios no-UE."
    ),
}

CHAT_INSTRUCTIONS = {
    Language.EN: (
        "Answer questions about the EU Cloud Sovereignty Framework, its eight objectives "
        "(SOV-1 to SOV-8), the SEAL maturity levels and related EU regulation "
        "(GDPR, NIS2, DORA). Be concise."
    ),
    Language.ES: (
        "Responde preguntas sobre el Marco de Soberanía Cloud UE, sus ocho objetivos "
        "(SOV-1 a SOV-8), los niveles de madurez SEAL y la normativa UE relacionada "
        "(GDPR, NIS2, DORA). Sé conciso."
    ),
}


def bullet_list(items: Sequence[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def format_objectives(objectives: Sequence[Objective]) -> str:
    blocks = []
    for obj in objectives:
        blocks.append(f"{obj.id} {obj.name}: {obj.description}\n{bullet_list(obj.factors)}")
    return "\n\n".join(blocks)


def format_seal_levels(definitions: Sequence[SealDefinition]) -> str:
    return "\n".join(f"SEAL-{d.level} {d.name}: {d.description}" for d in definitions)
