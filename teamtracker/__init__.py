"""Youth hockey season tracker: game normalization, season trends and report prompts."""

__all__ = [
    "config",
    "errors",
    "normalize",
    "trends",
    "features",
    "game_row",
    "prompts",
    "report",
    "airtable_client",
    "llm_client",
    "render",
    "cli",
]
