from strings_panel.api.panel.routes import router

__all__ = ["router"]
