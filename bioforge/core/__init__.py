"""Core building blocks: models, providers and the LLM call facade."""
