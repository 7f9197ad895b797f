"""Select Toggle 选项解析服务."""
