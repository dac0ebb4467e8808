"""Pure tracking logic: rep ranges, daily rollover, remote reconstruction and snapshot mutations."""
