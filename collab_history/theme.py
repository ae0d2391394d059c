from textual.theme import Theme


COLLAB_THEME = Theme(
    name="collab",
    primary="#4ea1f3",
    secondary="#8a8f98",
    accent="#f3b14e",
    foreground="#e6e6e6",
    background="#1e1f22",
    surface="#26282c",
    panel="#2f3237",
    success="#5fb36a",
    warning="#e0b341",
    error="#e0564c",
    dark=True,
)
