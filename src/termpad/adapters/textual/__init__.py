"""Textual host for the editor session."""

from .controller import KEY_COMMANDS, EditorUIHooks, TextualEditorAdapter, translate_key

__all__ = ["EditorUIHooks", "KEY_COMMANDS", "TextualEditorAdapter", "translate_key"]
