"""Personal workout tracker: daily logging, rollover and dual persistence."""
