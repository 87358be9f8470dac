"""Click plumbing shared by the newx command: base class and context."""
