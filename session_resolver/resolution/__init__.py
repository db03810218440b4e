"""Parameter resolution: merges session, profile, and muscle data into one payload."""
