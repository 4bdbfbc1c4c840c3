from strings_panel.config.settings import Config, config

__all__ = ["Config", "config"]
