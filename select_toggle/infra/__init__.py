"""基础设施层(Flask 钩子等)."""
