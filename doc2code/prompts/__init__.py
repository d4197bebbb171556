"""Prompt templates for SDK generation."""

from doc2code.prompts.renderer import PromptRenderer, default_renderer

__all__ = ["PromptRenderer", "default_renderer"]
