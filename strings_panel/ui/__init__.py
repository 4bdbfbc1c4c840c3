from strings_panel.ui.form import INPUT_FIELDS, FormField, FormState, Notification

__all__ = ["INPUT_FIELDS", "FormField", "FormState", "Notification"]
