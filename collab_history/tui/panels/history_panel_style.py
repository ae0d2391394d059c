"""CSS styles for the Collab History panel."""

HISTORY_PANEL_STYLE = """
    CollabHistoryPanel {
        width: 100%;
        height: 100%;
        padding: 0 1;
        layout: vertical;
    }

    .history-header {
        color: $primary;
        text-style: bold;
        margin-bottom: 1;
    }

    #history-states {
        height: 1fr;
    }

    #state-ready {
        height: 1fr;
    }

    #history-list {
        height: 1fr;
    }

    .history-empty {
        color: $foreground;
        text-style: italic;
    }

    DateLine {
        color: $secondary;
        text-style: bold;
        margin-top: 1;
    }

    DateLine.date-resolved {
        color: $success;
    }

    RevisionRow {
        height: auto;
        padding: 0 1;
        border-left: wide $panel;
    }

    RevisionRow.revision-current {
        border-left: wide $primary;
        background: $primary 10%;
    }

    RevisionRow.revision-obtained {
        border-left: wide $success;
    }

    RevisionRow.revision-absent {
        color: $foreground 60%;
    }

    RevisionRow.revision-in-progress {
        background: $warning 15%;
    }

    .revision-index {
        width: 6;
        color: $secondary;
    }

    .revision-body {
        width: 1fr;
    }

    .revision-buttons {
        width: auto;
        height: auto;
    }

    .revision-buttons Button {
        min-width: 8;
        margin-left: 1;
    }

    Pager {
        height: auto;
        margin-bottom: 1;
    }

    .pager-label {
        width: 1fr;
        content-align: center middle;
        height: 3;
    }

    StatusView {
        align: center middle;
        height: 1fr;
    }

    .status-message {
        width: 100%;
        content-align: center middle;
        text-style: bold;
    }
"""
