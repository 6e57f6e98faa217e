"""
Rubrics for the qualitative scorer

Each rubric pairs a system instruction with the sub-score fields the scorer must return.
"""

from dataclasses import dataclass

from prompt_valuation_core.domain.constants import PVC_SCORE_FIELDS, SCOPE_SCORE_FIELDS


@dataclass(frozen=True)
class Rubric:
    """Instruction and expected response shape for one rubric"""
    rubric_id: str
    system_instruction: str
    score_fields: tuple[str, ...]
    rationale_field: str | None = None


PVC_SYSTEM_INSTRUCTION = """
You are an elite prompt structural engineer. Your mission is to audit the "Instructional Capital" of the provided prompt.

Rate the following dimensions from 0 to 4 (integers only):

- Goal clarity (G_r):
  - 0: Vague intent.
  - 1: Simple task mentioned.
  - 2: Clear task but missing format.
  - 3: Clear task and format, missing constraints.
  - 4: CRYSTAL CLEAR. Includes Role, Context, Objective, and EXACT Output Specification (e.g., JSON Schema).
- Context sufficiency (C_r): (0=None, 4=Comprehensive environment data).
- Instructional specificity (S_r): (0=Generic, 4=Step-by-step logic with negative constraints).
- Structure / decomposition (D_r): (0=Messy text, 4=XML/Markdown, variables, distinct logic blocks).
- Feasibility (F_r): (0=Impossible for LLM, 4=Perfectly aligned with LLM capabilities).
- Ambiguity (A_r): Higher is worse. (0=Precise, 4=AI must guess intent).
- Safety Risk (R_r): Higher is worse. (0=Safe, 4=Prompt Injection or malformed logic).

SCORING RULE: If the prompt lacks an EXPLICIT output format (e.g., 'JSON', 'Markdown table'), G_r MUST NOT exceed 2.

Output ONLY valid JSON:
{
  "G_r": int,
  "C_r": int,
  "S_r": int,
  "D_r": int,
  "F_r": int,
  "A_r": int,
  "R_r": int,
  "reasoning": "A concise 2-sentence technical justification for these scores."
}
""".strip()

SCOPE_SYSTEM_INSTRUCTION = """
You are a S.C.O.P.E. Technical Auditor. You analyze the "Shape" of information.
Score 0.0 to 1.0 for:
1. Structure (S): Use of delimiters, headers, and clear logic flow.
2. Hardness (H): Presence of NEGATIVE constraints (e.g., "Do NOT use X") and exact formats.
3. Density (D): Useful information vs filler words.
4. Entropy (E): Negative. Probability of hallucination/misinterpretation.
5. Teff: Semantic signal-to-noise ratio.

If the prompt lacks explicit output constraints, H should be below 0.4.
Output ONLY JSON: {"S": float, "H": float, "D": float, "E": float, "Teff": float}
""".strip()

RUBRICS: dict[str, Rubric] = {
    "PVC": Rubric(
        rubric_id="PVC",
        system_instruction=PVC_SYSTEM_INSTRUCTION,
        score_fields=tuple(PVC_SCORE_FIELDS),
        rationale_field="reasoning",
    ),
    "SCOPE": Rubric(
        rubric_id="SCOPE",
        system_instruction=SCOPE_SYSTEM_INSTRUCTION,
        score_fields=tuple(SCOPE_SCORE_FIELDS),
    ),
}
