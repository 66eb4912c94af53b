"""Domain layer: descriptor records, matching rules, ports. No I/O."""
