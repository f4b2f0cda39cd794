CSS = """
:root, html[data-theme="light"] {
  color-scheme: light;
  --bg: #f6f7f9;
  --card: #ffffff;
  --muted: #4b5563;
  --text: #0f172a;
  --border: rgba(15,23,42,0.14);
  --accent: #0284c7;
  --good: #15803d;
  --warn: #b45309;
  --bad: #be123c;
  --hover: rgba(2,132,199,0.10);
  --active: rgba(251,191,36,0.35);
}

html[data-theme="dark"] {
  color-scheme: dark;
  --bg: #0b0f14;
  --card: #111823;
  --muted: #9bb0c2;
  --text: #e7eef6;
  --border: rgba(255,255,255,0.12);
  --accent: #7dd3fc;
  --good: #4ade80;
  --warn: #fbbf24;
  --bad: #fb7185;
  --hover: rgba(125,211,252,0.10);
  --active: rgba(251,191,36,0.25);
}
html, body { margin:0; padding:0; font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Arial; background: var(--bg); color: var(--text); }
header { padding: 22px 24px 6px; display: flex; align-items: baseline; gap: 14px; flex-wrap: wrap; }
h1 { margin:0; font-size: 22px; }
small { color: var(--muted); }
main { padding: 12px 24px 40px; display: grid; gap: 16px; max-width: 1200px; }
section { background: var(--card); border: 1px solid var(--border); border-radius: 10px; padding: 14px 14px 12px; }
h2 { margin: 0 0 10px; font-size: 16px; }
#theme-toggle { margin-left: auto; background: var(--card); color: var(--text); border: 1px solid var(--border); border-radius: 999px; padding: 4px 10px; font-size: 16px; cursor: pointer; }
.good { color: var(--good); }
.warn { color: var(--warn); }
.bad { color: var(--bad); }
.table-wrap { max-width: 100%; overflow-x: auto; overflow-y: hidden;}
table { width: 100%;  border-collapse: collapse; font-size: 13px; table-layout: auto;}
th, td { padding: 6px 8px; line-height: 1.3;  border-bottom: 1px solid var(--border); border-right: 1px solid var(--border); text-align: left; }
th { position: sticky; top: 0; background: var(--card); z-index: 1; }
th:last-child, td:last-child { border-right: none; }
.hover-col { background: var(--hover); }
sup { color: var(--accent); font-size: 10px; margin-left: 1px; }
sup[data-note] { cursor: pointer; }
.notes ol { margin: 0; padding-left: 22px; font-size: 13px; color: var(--muted); }
.notes li { padding: 2px 4px; border-radius: 4px; transition: background 0.3s; }
.note-active { background: var(--active); color: var(--text); }
"""

JS = r"""
(function () {
  const cfg = JSON.parse(document.getElementById("page-settings").textContent);
  const root = document.documentElement;
  const toggleBtn = document.getElementById("theme-toggle");

  function readStored() {
    try { return localStorage.getItem(cfg.storageKey); } catch (e) { return null; }
  }

  function setTheme(theme) {
    root.setAttribute("data-theme", theme);
    try { localStorage.setItem(cfg.storageKey, theme); } catch (e) { /* storage disabled */ }
    toggleBtn.textContent = theme === "dark" ? "☀" : "🌙";
  }

  const stored = readStored();
  const prefersDark = window.matchMedia && window.matchMedia("(prefers-color-scheme: dark)").matches;
  if (stored === "light" || stored === "dark") setTheme(stored);
  else if (prefersDark) setTheme("dark");
  else setTheme(cfg.initialTheme === "dark" ? "dark" : "light");

  toggleBtn.addEventListener("click", () => {
    setTheme(root.getAttribute("data-theme") === "dark" ? "light" : "dark");
  });

  const table = document.getElementById("compare-table");
  if (table) {
    table.querySelectorAll("td, th").forEach(cell => {
      cell.addEventListener("mouseenter", () => {
        const i = cell.cellIndex;
        table.querySelectorAll("tr").forEach(r => {
          if (r.cells[i]) r.cells[i].classList.add(cfg.hoverClass);
        });
      });
      cell.addEventListener("mouseleave", () => {
        table.querySelectorAll("." + cfg.hoverClass)
          .forEach(c => c.classList.remove(cfg.hoverClass));
      });
    });
  }

  document.querySelectorAll("sup[data-note]").forEach(sup => {
    sup.addEventListener("click", () => {
      const target = document.getElementById(cfg.notePrefix + sup.dataset.note);
      if (!target) return;
      target.scrollIntoView({ behavior: "smooth", block: "center" });
      target.classList.add(cfg.activeClass);
      setTimeout(() => target.classList.remove(cfg.activeClass), cfg.activeMs);
    });
  });
})();
"""
