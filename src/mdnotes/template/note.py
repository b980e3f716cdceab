# SPDX-License-Identifier: MIT

from textwrap import dedent

import pendulum

from mdnotes.errors import InvalidNoteType
from mdnotes.model.note import NoteType, TodoChanges
from mdnotes.time import date_to_str

NOTE_TEMPLATES: dict[str, str] = {
    NoteType.DAILY: dedent("""\
        # {date}

        ## Tasks
        - [ ]

        ## Notes


        ## Follow-ups

        """),
    NoteType.PROJECT: dedent("""\
        # {title}

        ## Overview


        ## Goals


        ## Status


        ## Actions
        - [ ]

        ## Notes


        ## Decisions


        ## Risks
        """),
    NoteType.MEETING: dedent("""\
        # {title}

        **Date:** {date}
        **Attendees:**

        ## Agenda


        ## Discussion


        ## Decisions


        ## Action Items
        - [ ]

        ## Follow-up
        """),
    NoteType.DESIGN: dedent("""\
        # {title}

        ## Problem Statement


        ## Solution Overview


        ## Options Considered

        ### Option A:

        #### Summary

        #### Pros
        -

        #### Cons
        -

        ## Recommended Approach


        ## Implementation Plan


        ## Risks & Mitigations
        """),
    NoteType.LEARNING: dedent("""\
        # {title}

        **Date:** {date}
        **Source:**

        ## Key Concepts


        ## Summary


        ## Examples


        ## Code/Commands
        ```

        ```

        ## Notes & Insights


        ## Action Items
        - [ ]

        ## Related Topics
        -

        ## References
        -
        """),
}


def render_note_template(note_type: str, title: str, today: pendulum.Date) -> str:
    template = NOTE_TEMPLATES.get(note_type)
    if template is None:
        raise InvalidNoteType(note_type)
    return template.replace("{title}", title).replace("{date}", date_to_str(today))


def get_todo_changes_template() -> TodoChanges:
    return {"new": [], "completed": [], "modified": []}
