"""Load orchestration: concurrent provider fetch → normalized, frozen store."""
