"""结构化日志相关的上下文与错误适配."""
