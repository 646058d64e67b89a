"""Host adapters that drive an ``EditorSession`` from a real terminal."""
