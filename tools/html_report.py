"""
HTML Report Generator — a static HTML page for one acceptance run.
"""

import os
from datetime import datetime

from models.state import ScenarioResult


def generate_html_report(results: list[ScenarioResult], output_path: str) -> str:
    """
    Generate a static HTML page listing every scenario with a status filter.

    Args:
        results: Scenario results collected during the run.
        output_path: Path to save the HTML file.

    Returns:
        Path to the generated HTML file.
    """
    timestamp_str = datetime.now().strftime("%B %d, %Y at %I:%M %p")

    total = len(results)
    status_counts = {}
    for result in results:
        status_counts[result.status] = status_counts.get(result.status, 0) + 1
    passed = status_counts.get("PASSED", 0)
    total_duration = sum(r.duration for r in results)

    # Group scenarios by feature
    features = {}
    for result in results:
        features.setdefault(result.feature or "Unnamed feature", []).append(result)

    # Build Toolbar HTML (status filters)
    toolbar_html = f"""
    <div class="toolbar">
      <span class="toolbar-label">Status:</span>
      <button class="toolbar-btn status-filter active" onclick="filterStatus('all', this)">
        All <span class="badgish">{total}</span>
      </button>
    """
    for status, count in sorted(status_counts.items()):
        toolbar_html += f"""
      <button class="toolbar-btn status-filter" onclick="filterStatus('{_esc(status)}', this)">
        {_esc(status.title())} <span class="badgish">{count}</span>
      </button>
    """
    toolbar_html += "</div>"

    # Build scenario cards HTML
    cards_html = '<div class="content-area">'
    if not results:
        cards_html += '<p class="empty">No scenarios were run.</p>'
    for feature, feature_results in features.items():
        cards_html += '<div class="feature-section">\n'
        cards_html += f'  <h2 class="feature-name">{_esc(feature)} <span class="badge">{len(feature_results)}</span></h2>\n'
        for result in feature_results:
            status = _esc(result.status)
            css = "passed" if result.passed else "failed" if result.status == "FAILED" else "other"
            error_html = ""
            if result.error:
                error_html = f'<pre class="error">{_esc(result.error)}</pre>'
            cards_html += f"""  <div class="scenario-card {css}" data-status="{status}">
    <div class="scenario-header">
      <h3 class="scenario-name">{_esc(result.name)}</h3>
      <span class="status-tag {css}">{status}</span>
    </div>
    <div class="scenario-meta">⏱ {result.duration:.2f}s · {result.finished_at.strftime("%H:%M:%S")}</div>
    {error_html}
  </div>
"""
        cards_html += "</div>\n"
    cards_html += "</div>"

    html = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Careers Acceptance Run — {timestamp_str}</title>
  <style>
    :root {{
      --bg-dark: #0f0f13;
      --bg-panel: #181820;
      --border: #2a2a35;
      --accent: #6366f1;
      --pass: #22c55e;
      --fail: #ef4444;
      --text-main: #e0e0e0;
      --text-muted: #9ca3af;
    }}

    * {{ margin: 0; padding: 0; box-sizing: border-box; }}

    body {{
      font-family: -apple-system, BlinkMacSystemFont, 'Inter', 'Segoe UI', Roboto, sans-serif;
      background: var(--bg-dark);
      color: var(--text-main);
    }}

    .header {{
      background: var(--bg-panel);
      padding: 1rem 2rem;
      display: flex;
      justify-content: space-between;
      align-items: center;
    }}
    .brand h1 {{ font-size: 1.25rem; font-weight: 700; color: #fff; }}
    .brand span {{ color: var(--accent); }}
    .subtitle {{ color: var(--text-muted); font-size: 0.85rem; margin-top: 2px; }}

    .stats {{ display: flex; gap: 1.5rem; }}
    .stat {{ display: flex; flex-direction: column; align-items: flex-end; }}
    .stat-val {{ font-size: 1.1rem; font-weight: 700; color: #fff; line-height: 1; }}
    .stat-lbl {{ font-size: 0.7rem; color: var(--text-muted); text-transform: uppercase; margin-top: 4px; }}

    .toolbar {{
      background: var(--bg-panel);
      border-top: 1px solid var(--border);
      border-bottom: 1px solid var(--border);
      padding: 0.8rem 2rem;
      display: flex;
      gap: 0.8rem;
      align-items: center;
    }}
    .toolbar-label {{
      font-size: 0.75rem;
      text-transform: uppercase;
      color: var(--text-muted);
      font-weight: 600;
    }}
    .toolbar-btn {{
      background: rgba(255,255,255,0.05);
      border: 1px solid transparent;
      color: var(--text-muted);
      padding: 0.4rem 0.8rem;
      border-radius: 6px;
      cursor: pointer;
      font-size: 0.85rem;
      display: flex;
      align-items: center;
      gap: 6px;
    }}
    .toolbar-btn.active {{
      background: rgba(99, 102, 241, 0.1);
      color: var(--accent);
      border-color: rgba(99, 102, 241, 0.2);
      font-weight: 600;
    }}
    .badgish {{
      background: rgba(255,255,255,0.05);
      border-radius: 99px;
      padding: 2px 8px;
      font-size: 0.7rem;
    }}

    .content-area {{ padding: 2rem; }}
    .empty {{ color: var(--text-muted); }}
    .feature-section {{ margin-bottom: 2.5rem; }}
    .feature-name {{
      font-size: 1.1rem;
      color: #fff;
      margin-bottom: 1rem;
      padding-bottom: 0.5rem;
      border-bottom: 1px solid var(--border);
    }}

    .scenario-card {{
      background: rgba(255,255,255,0.02);
      border: 1px solid var(--border);
      border-left: 4px solid var(--text-muted);
      border-radius: 8px;
      padding: 1rem 1.2rem;
      margin-bottom: 0.8rem;
    }}
    .scenario-card.passed {{ border-left-color: var(--pass); }}
    .scenario-card.failed {{ border-left-color: var(--fail); }}
    .scenario-header {{ display: flex; justify-content: space-between; align-items: center; }}
    .scenario-name {{ font-size: 1rem; color: #fff; font-weight: 600; }}
    .scenario-meta {{ font-size: 0.8rem; color: var(--text-muted); margin-top: 0.4rem; }}

    .status-tag {{ font-size: 0.7rem; padding: 2px 8px; border-radius: 4px; background: rgba(255,255,255,0.05); }}
    .status-tag.passed {{ color: var(--pass); }}
    .status-tag.failed {{ color: var(--fail); }}

    .error {{
      margin-top: 0.8rem;
      padding: 0.8rem;
      background: rgba(239, 68, 68, 0.08);
      border-radius: 6px;
      font-size: 0.8rem;
      white-space: pre-wrap;
      color: #fca5a5;
    }}
  </style>
</head>
<body>

  <header class="header">
    <div class="brand">
      <h1>🧪 <span>Careers Acceptance</span></h1>
      <div class="subtitle">Run finished on {timestamp_str}</div>
    </div>
    <div class="stats">
      <div class="stat">
        <span class="stat-val">{total}</span>
        <span class="stat-lbl">Scenarios</span>
      </div>
      <div class="stat">
        <span class="stat-val">{passed}</span>
        <span class="stat-lbl">Passed</span>
      </div>
      <div class="stat">
        <span class="stat-val">{total - passed}</span>
        <span class="stat-lbl">Not passed</span>
      </div>
      <div class="stat">
        <span class="stat-val">{total_duration:.1f}s</span>
        <span class="stat-lbl">Duration</span>
      </div>
    </div>
  </header>

  {toolbar_html}

  {cards_html}

  <script>
    function filterStatus(status, btn) {{
        document.querySelectorAll('.status-filter').forEach(b => b.classList.remove('active'));
        btn.classList.add('active');

        document.querySelectorAll('.scenario-card').forEach(card => {{
            const visible = status === 'all' || card.dataset.status === status;
            card.style.display = visible ? 'block' : 'none';
        }});
    }}
  </script>
</body>
</html>"""

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)

    return output_path


def _esc(text: str) -> str:
    """HTML-escape a string."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
