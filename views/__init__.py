"""View modules for manual routing.

This project uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Every screen lives under `views/` and exposes a
`view(ctx)` function taking the session's AppContext.

Add any new screen as a module with a `view(ctx)` callable, add its `View`
member in `services/router.py` and register it in `PAGE_REGISTRY` inside
`app.py`.
"""
