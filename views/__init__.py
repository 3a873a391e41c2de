"""View modules for manual routing.

The app keeps its own navigation state in `st.session_state` instead of using
Streamlit's automatic multi-page system. Each screen lives under `views/` and
exposes a `view(machine)` function that receives the session's
`NavigationStateMachine`, renders the screen and dispatches intents.

Add any new screen as a module with a `view(machine)` callable and register it
in `PAGE_REGISTRY` inside `app.py`.
"""
