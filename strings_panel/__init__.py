"""
strings-panel: strings 服务的客户端面板
"""

__version__ = "0.1.0"
