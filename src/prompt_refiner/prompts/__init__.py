"""Prompt compilation for the refine tool."""

from .compiler import clean_prompt, compile_prompt, build_system_instruction, build_user_payload

__all__ = ["clean_prompt", "compile_prompt", "build_system_instruction", "build_user_payload"]
