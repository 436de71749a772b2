"""Link scanning, slug assignment, rewriting, reporting and sync."""
