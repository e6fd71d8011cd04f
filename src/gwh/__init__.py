"""gwh - git worktree helper."""
