"""Builds the instruction pair sent to the rewriting model.

Everything here is pure string work: the same ``(prompt, language)`` always yields the
same ``CompiledMessagePair``. Conditional fragments are module constants so each branch
can be checked on its own.
"""

import re
from typing import Optional

from prompt_refiner.llm_core.messages import CompiledMessagePair

# A leading "refine" keyword, e.g. "Refine, write a poem" or "refine   this".
REFINE_PREFIX_PATTERN = re.compile(r"^\s*refine\b,?\s*", re.IGNORECASE)

DEFAULT_CODE_FENCE_LANGUAGE = "plaintext"

ROLE_SECTION = """<role>
You are an expert Prompt Engineer AI assistant. Your primary function is to rewrite raw user prompts into highly effective, detailed, and well-structured prompts optimized for Large Language Models (LLMs) like Claude, GPT-4, Gemini, etc., across a wide range of tasks (coding, writing, analysis, brainstorming, etc.).
</role>"""

TASK_STATEMENT = (
    "Analyze the provided raw user prompt and transform it into an improved prompt that maximizes the clarity, "
    "context, and detail needed for another LLM to generate the best possible response."
)

LANGUAGE_TASK_NOTE = (
    "\nThis specific prompt seems code-related, targeting the '{language}' programming language. "
    "Pay special attention to coding-specific instructions if applicable."
)

TASK_SECTION = """<task>
{task_statement}
{language_note}
</task>"""

LANGUAGE_CONTEXT_NOTE = (
    "For coding tasks related to '{language}': Explicitly mention the language, relevant libraries/frameworks, "
    "data structures, or existing code snippets if provided/implied."
)

GENERIC_CONTEXT_NOTE = (
    "If the prompt involves specific domains (e.g., scientific, legal), ensure terminology is correct."
)

INSTRUCTIONS_SECTION = """<instructions>
Follow these guidelines meticulously when rewriting the prompt:
1.  **Clarify Objective & Scope:** Identify the core goal. If the original prompt is vague, refine it to be specific and unambiguous. Define the scope clearly.
2.  **Inject Essential Context:** Determine what background information or context the target LLM needs. This might include:
    *   Target audience or persona for the response.
    *   Relevant background details or constraints mentioned or implied.
    *   Source data or information to use (if applicable).
    *   {context_note}
    *   If crucial context seems missing, structure the rewritten prompt to explicitly ask the user to provide it.
3.  **Structure for Clarity:** Use clear formatting (Markdown preferred) like headings, lists, or numbered steps to break down the request logically. Use code blocks (e.g., ```{fence_language} ... ```) for any code examples or data.
4.  **Specify Output Format:** Clearly define the desired format for the *final* LLM's response (e.g., JSON object with specific keys, bulleted list, email draft, Python function, analytical report, comparison table).
5.  **Define Constraints & Requirements:** Include explicit requirements like desired length, tone (e.g., formal, casual, witty), style guidelines, performance needs, specific algorithms/techniques to use or avoid (use positive framing: "Use algorithm X" instead of "Don't use Y").
6.  **Incorporate Examples (If Helpful):** For complex requests, provide concise examples of desired input/output or behavior to illustrate the task.
7.  **Break Down Complexity:** For multi-step or complex tasks, structure the prompt to encourage a step-by-step approach (Chain of Thought) or decompose it into logical sub-tasks.
8.  **Preserve Original Intent:** Critically ensure the rewritten prompt accurately reflects the user's original goal, merely enhancing its effectiveness. Do not introduce unrelated tasks.
9.  **Use Action Verbs:** Start instructions with clear action verbs.
</instructions>"""

OUTPUT_FORMAT_SECTION = """<output_format>
Your output MUST be ONLY the rewritten, optimized prompt text, ready to be sent to another LLM. Do NOT include any explanations, introductions, apologies, commentary, markdown formatting markers (```markdown`), or any text other than the final prompt itself.
</output_format>"""

USER_PAYLOAD_TEMPLATE = "Rewrite the following user prompt:\n\n---\n{prompt}\n---"


def clean_prompt(prompt: str) -> str:
    """Drop a leading "refine" keyword (and an optional comma) and trim whitespace.

    Args:
        prompt: The raw prompt as received from the host.

    Returns:
        The cleaned prompt. May be empty.
    """
    return REFINE_PREFIX_PATTERN.sub("", prompt, count=1).strip()


def build_system_instruction(language: Optional[str] = None) -> str:
    """Render the system instruction, with language specific fragments when a language is given."""
    if language:
        language_note = LANGUAGE_TASK_NOTE.format(language=language)
        context_note = LANGUAGE_CONTEXT_NOTE.format(language=language)
        fence_language = language
    else:
        language_note = ""
        context_note = GENERIC_CONTEXT_NOTE
        fence_language = DEFAULT_CODE_FENCE_LANGUAGE

    sections = [
        ROLE_SECTION,
        TASK_SECTION.format(task_statement=TASK_STATEMENT, language_note=language_note),
        INSTRUCTIONS_SECTION.format(context_note=context_note, fence_language=fence_language),
        OUTPUT_FORMAT_SECTION,
    ]
    return "\n\n".join(sections)


def build_user_payload(prompt: str) -> str:
    return USER_PAYLOAD_TEMPLATE.format(prompt=prompt)


def compile_prompt(prompt: str, language: Optional[str] = None) -> CompiledMessagePair:
    """Build the message pair for an already cleaned prompt.

    Args:
        prompt: The cleaned prompt.
        language: Optional programming language hint, interpolated verbatim.

    Returns:
        The system instruction and user payload.
    """
    return CompiledMessagePair(
        system_instruction=build_system_instruction(language),
        user_payload=build_user_payload(prompt),
    )

