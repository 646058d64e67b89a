"""Runtime services shared by the editor core and its hosts."""
