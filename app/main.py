import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from app.config import DATA_DIR, configure_logging
from app.shell import MountainFlow
from app.store import PreferenceStore

logger = logging.getLogger(__name__)


def build_default_shell() -> MountainFlow:
    logger.info("Loading preferences from %s", DATA_DIR.resolve())
    return MountainFlow(PreferenceStore(DATA_DIR))


def get_shell(request: Request) -> MountainFlow:
    return request.app.state.shell


def create_app(shell: MountainFlow | None = None) -> FastAPI:
    """Build the HTTP app around ``shell``.

    Without an explicit shell, one is loaded from ``DATA_DIR`` when the app
    starts. Every route is a coroutine with no awaits, so requests are handled
    one at a time on the event loop thread and never race on the store.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        if getattr(app.state, "shell", None) is None:
            app.state.shell = build_default_shell()
        yield

    app = FastAPI(title="Mountain Flow", lifespan=lifespan)
    app.state.shell = shell

    @app.get("/", response_class=HTMLResponse)
    async def page() -> str:
        return PAGE_HTML

    @app.get("/health")
    async def health() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/state")
    async def get_state(flow: MountainFlow = Depends(get_shell)) -> dict[str, Any]:
        return flow.snapshot()

    @app.get("/content")
    async def get_content(flow: MountainFlow = Depends(get_shell)) -> dict[str, Any]:
        return flow.content.as_dict()

    @app.post("/morning-ritual/{key}/toggle")
    async def toggle_morning_item(key: str, flow: MountainFlow = Depends(get_shell)) -> dict[str, Any]:
        try:
            flow.toggle_morning_item(key)
        except KeyError as err:
            raise HTTPException(status_code=404, detail=f"Unknown morning ritual item: {key}") from err
        return flow.snapshot()

    @app.put("/evening-energy")
    async def put_evening_energy(
        payload: dict[str, Any] = Body(...), flow: MountainFlow = Depends(get_shell)
    ) -> dict[str, Any]:
        level = str(payload.get("level", "")).strip()
        try:
            flow.set_evening_energy(level)
        except ValueError as err:
            raise HTTPException(status_code=400, detail=str(err)) from err
        return flow.snapshot()

    @app.post("/outdoor-break")
    async def post_outdoor_break(
        minutes: int = Query(default=15), flow: MountainFlow = Depends(get_shell)
    ) -> dict[str, Any]:
        if minutes not in flow.content.outdoor_breaks:
            allowed = ", ".join(str(m) for m in flow.content.outdoor_breaks)
            raise HTTPException(status_code=400, detail=f"minutes must be one of {allowed}.")
        suggestion = flow.request_outdoor_break(minutes)
        return {**flow.snapshot(), "suggestion": suggestion}

    @app.put("/adventure/tier")
    async def put_adventure_tier(
        payload: dict[str, Any] = Body(...), flow: MountainFlow = Depends(get_shell)
    ) -> dict[str, Any]:
        tier = str(payload.get("tier", "")).strip()
        try:
            flow.set_adventure_distance_tier(tier)
        except ValueError as err:
            raise HTTPException(status_code=400, detail=str(err)) from err
        return flow.snapshot()

    @app.post("/adventure")
    async def post_adventure(flow: MountainFlow = Depends(get_shell)) -> dict[str, Any]:
        suggestion = flow.request_adventure()
        return {**flow.snapshot(), "suggestion": suggestion}

    return app


PAGE_HTML = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <meta name="color-scheme" content="light dark" />
  <title>Mountain Flow</title>
  <style>
    :root {
      --bg: #ffffff;
      --panel: #f5f5f5;
      --line: #e5e5e5;
      --text: #171717;
      --muted: #737373;
      --btn: #e5e5e5;
      --btn-active: #d4d4d4;
      --radius: 8px;
    }

    @media (prefers-color-scheme: dark) {
      :root {
        --bg: #171717;
        --panel: #262626;
        --line: #404040;
        --text: #ffffff;
        --muted: #a3a3a3;
        --btn: #404040;
        --btn-active: #737373;
      }
    }

    * { box-sizing: border-box; }

    body {
      margin: 0;
      padding: 16px;
      min-height: 100vh;
      color: var(--text);
      background: var(--bg);
      font-family: system-ui, -apple-system, "Segoe UI", Roboto, Arial, sans-serif;
    }

    header { margin-bottom: 16px; }
    h1 { font-size: 20px; font-weight: 700; margin: 0; }
    h2 { font-size: 16px; font-weight: 600; margin: 0 0 8px; }
    .muted { color: var(--muted); font-size: 13px; margin: 0 0 4px; }
    .hint { color: var(--muted); font-size: 12px; margin: 0 0 4px; }

    section { margin-bottom: 16px; }

    .check-row { display: flex; align-items: center; margin-bottom: 4px; }
    .check-row span { margin-left: 8px; text-transform: capitalize; }

    button {
      border: 0;
      border-radius: var(--radius);
      padding: 8px;
      color: var(--text);
      background: var(--btn);
      cursor: pointer;
    }

    .tier-row { display: flex; gap: 4px; margin-bottom: 8px; }
    .tier-row button { padding: 4px 8px; background: var(--panel); }
    .tier-row button.active { background: var(--btn-active); }
    .wide { width: 100%; }
    .hidden { display: none; }
  </style>
</head>
<body>
  <header>
    <h1>Mountain Flow</h1>
    <p class="muted">Habits, Movement &amp; Mindfulness</p>
  </header>

  <section>
    <h2>Morning Ritual</h2>
    <p class="hint">10–20 min pre-work activation</p>
    <div id="morningList"></div>
  </section>

  <section>
    <h2>Evening Detox (<span id="energyLabel"></span>)</h2>
    <ul id="detoxList"></ul>
    <select id="energySelect"></select>
  </section>

  <section>
    <h2>Outdoor Break</h2>
    <div id="breakButtons"></div>
    <p id="outdoorBreak" class="hidden"></p>
  </section>

  <section>
    <h2>Weekend Adventure (<span id="seasonLabel"></span>)</h2>
    <div id="tierRow" class="tier-row"></div>
    <button id="adventureBtn" class="wide">Generate Adventure</button>
    <p id="adventure" class="hidden"></p>
  </section>

  <section>
    <h2>Sport Planning &amp; Recovery</h2>
    <p>Placeholder for climbing, running, skiing schedule, pain &amp; recovery tracking.</p>
  </section>

  <section>
    <h2>Language Learning</h2>
    <p>Placeholder for French, Spanish, Swedish, Italian tracking and streaks.</p>
  </section>

  <section>
    <h2>Weekly Review</h2>
    <p>Placeholder for weekly narrative reflection and analytics summary.</p>
  </section>

  <script>
    const TIER_TITLES = { quick: 'Quick', weekend: 'Weekend', special: 'Special' };

    async function send(url, method, body) {
      const resp = await fetch(url, {
        method,
        headers: body ? { 'Content-Type': 'application/json' } : undefined,
        body: body ? JSON.stringify(body) : undefined,
      });
      if (!resp.ok) return;
      render(await resp.json());
    }

    function showText(id, text, prefix) {
      const el = document.getElementById(id);
      el.textContent = text ? `${prefix || ''}${text}` : '';
      el.classList.toggle('hidden', !text);
    }

    function render(state) {
      const morning = document.getElementById('morningList');
      morning.innerHTML = '';
      Object.keys(state.morning_ritual).forEach((key) => {
        const row = document.createElement('label');
        row.className = 'check-row';
        const box = document.createElement('input');
        box.type = 'checkbox';
        box.checked = Boolean(state.morning_ritual[key]);
        box.addEventListener('change', () => send(`/morning-ritual/${encodeURIComponent(key)}/toggle`, 'POST'));
        const label = document.createElement('span');
        label.textContent = key;
        row.append(box, label);
        morning.appendChild(row);
      });

      document.getElementById('energyLabel').textContent = state.evening_energy;
      const detox = document.getElementById('detoxList');
      detox.innerHTML = '';
      state.detox_menu.forEach((item) => {
        const li = document.createElement('li');
        li.textContent = item;
        detox.appendChild(li);
      });
      const select = document.getElementById('energySelect');
      if (!select.options.length) {
        state.evening_energy_options.forEach((opt) => select.add(new Option(opt, opt)));
      }
      select.value = state.evening_energy;

      const breaks = document.getElementById('breakButtons');
      if (!breaks.children.length) {
        state.outdoor_break_minutes.forEach((minutes) => {
          const btn = document.createElement('button');
          btn.textContent = `${minutes} min break`;
          btn.style.marginRight = '4px';
          btn.addEventListener('click', () => send(`/outdoor-break?minutes=${minutes}`, 'POST'));
          breaks.appendChild(btn);
        });
      }
      showText('outdoorBreak', state.outdoor_break, 'Suggestion: ');

      document.getElementById('seasonLabel').textContent = state.season;
      const tiers = document.getElementById('tierRow');
      tiers.innerHTML = '';
      state.adventure_tiers.forEach((tier) => {
        const btn = document.createElement('button');
        btn.textContent = TIER_TITLES[tier] || tier;
        btn.classList.toggle('active', tier === state.adventure_tier);
        btn.addEventListener('click', () => send('/adventure/tier', 'PUT', { tier }));
        tiers.appendChild(btn);
      });
      showText('adventure', state.adventure);
    }

    document.getElementById('energySelect').addEventListener('change', (ev) => {
      send('/evening-energy', 'PUT', { level: ev.target.value });
    });
    document.getElementById('adventureBtn').addEventListener('click', () => send('/adventure', 'POST'));

    fetch('/state').then((r) => r.json()).then(render);
  </script>
</body>
</html>
"""

app = create_app()
