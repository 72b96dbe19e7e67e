"""Profile board API: accounts, public profiles and profile comments over a JSON document."""
