"""
App Component

Demo application: a reactive counter and a user profile loaded over HTTP.
"""

import html
import logging
from typing import Optional

from ..client import HttpClient
from ..component import Component

logger = logging.getLogger(__name__)

DEMO_BASE_URL = "https://jsonplaceholder.typicode.com"


class App(Component):
    """Counter and user profile demo."""

    def __init__(self, client: Optional[HttpClient] = None):
        super().__init__()
        self.client = client or HttpClient()

        self.set_state({
            "count": 0,
            "user": None,
            "loading": False,
            "error": None,
        })

    def on_mount(self):
        logger.info("🚀 JokoUI App mounted successfully!")
        if not self.client.base_url:
            self.client.set_base_url(DEMO_BASE_URL)

    def increment(self, event=None):
        self.state.count = self.state.count + 1

    def decrement(self, event=None):
        self.state.count = self.state.count - 1

    def reset(self, event=None):
        self.state.count = 0

    async def fetch_user(self, event=None):
        """Load the profile of user 1 into state."""
        self.state.loading = True
        self.state.error = None

        try:
            response = await self.client.get("/users/1")
            self.state.user = response.data
            self.state.loading = False
        except Exception as e:
            logger.error(f"Failed to fetch user: {e}")
            self.state.error = str(e)
            self.state.loading = False

    def clear_user(self, event=None):
        self.state.user = None
        self.state.error = None

    def _count_class(self) -> str:
        count = self.state.count
        return "negative" if count < 0 else "positive" if count > 0 else ""

    def _render_user(self) -> str:
        user = self.state.user
        if not user:
            return """
                <div class="placeholder">
                    <span>👤</span>
                    <p>Click "Fetch User Profile" to load data from the backend</p>
                </div>"""

        name = user.get("name") or ""
        company = user.get("company") or {}
        return f"""
                <div class="user-card">
                    <div class="user-avatar">{html.escape(name[:1].upper() or '?')}</div>
                    <div class="user-info">
                        <h3>{html.escape(name or 'Unknown')}</h3>
                        <p class="user-email">📧 {html.escape(str(user.get('email') or 'N/A'))}</p>
                        <p class="user-phone">📱 {html.escape(str(user.get('phone') or 'N/A'))}</p>
                        <p class="user-company">🏢 {html.escape(str(company.get('name') or 'N/A'))}</p>
                        <p class="user-website">🌍 {html.escape(str(user.get('website') or 'N/A'))}</p>
                    </div>
                </div>"""

    def render(self) -> str:
        count, user, loading, error = (self.state.count, self.state.user,
                                       self.state.loading, self.state.error)

        clear_button = """
                    <button class="btn btn-secondary" data-joko-click="clear_user">🗑️ Clear</button>""" if user else ""
        error_message = f"""
                <div class="error-message"><span>❌</span> {html.escape(str(error))}</div>""" if error else ""

        return f"""
            <div class="joko-app" data-loading="{str(bool(loading)).lower()}">
                <header class="app-header">
                    <div class="logo">
                        <span class="logo-icon">🎯</span>
                        <h1>JokoUI</h1>
                    </div>
                    <p class="tagline">A lightweight reactive UI runtime</p>
                </header>

                <main class="app-content">
                    <section class="card counter-section">
                        <h2>⚡ Reactive Counter</h2>
                        <div class="counter-display">
                            <span class="count {self._count_class()}">{count}</span>
                        </div>
                        <div class="button-group">
                            <button class="btn btn-primary" data-joko-click="decrement"><span>−</span> Decrease</button>
                            <button class="btn btn-secondary" data-joko-click="reset"><span>↺</span> Reset</button>
                            <button class="btn btn-primary" data-joko-click="increment"><span>+</span> Increase</button>
                        </div>
                    </section>

                    <section class="card api-section">
                        <h2>🌐 API Demo</h2>
                        <div class="button-group">
                            <button class="btn btn-accent" data-joko-click="fetch_user" {'disabled' if loading else ''}>
                                {'⏳ Loading...' if loading else '📡 Fetch User Profile'}
                            </button>{clear_button}
                        </div>{error_message}{self._render_user()}
                    </section>
                </main>

                <footer class="app-footer">
                    <p class="version">v1.0.0</p>
                </footer>
            </div>
        """
