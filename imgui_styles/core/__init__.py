"""Style vocabulary, headless toolkit objects and the patch operations."""
