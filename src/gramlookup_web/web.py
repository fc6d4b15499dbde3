from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from gramlookup.engine import Engine
from gramlookup.config import TOP_K, MAX_TOP_K, MIN_MATCH_SCORE

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None

def _engine_or_503():
    if _engine is None or _engine.index is None:
        return None, (jsonify({"ok": False, "error": "engine not initialized"}), 503)
    return _engine, None

# ---------- API ----------
@app.get("/api/lookup")
def api_lookup():
    eng, err = _engine_or_503()
    if err:
        return err
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    min_score = request.args.get("min", MIN_MATCH_SCORE, type=float)
    k = max(1, min(MAX_TOP_K, k))
    if not q:
        return jsonify([])
    rows = eng.lookup(q, top_k=k, min_match_score=min_score)
    return jsonify([r.as_dict() for r in rows])

@app.get("/api/health")
def api_health():
    eng, err = _engine_or_503()
    if err:
        return err
    return jsonify({"ok": True, "entries": eng.size()})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Fuzzy lookup • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:860px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap }
.controls input{
  padding:10px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:15px;
}
#q{ flex:1; min-width:240px }
#k, #min{ width:80px }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.results{ margin-top:16px; border-radius:12px; border:1px solid var(--border) }
.row{ display:grid; grid-template-columns:3rem 6rem 1fr; gap:10px; padding:10px 14px; border-top:1px solid var(--border) }
.row:first-child{ border-top:none }
.head{ font-weight:600; color:var(--muted) }
.empty{ padding:24px; text-align:center; color:var(--muted) }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Fuzzy lookup</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Type to search…" autocomplete="off" autofocus />
        <label>Top-K <input id="k" type="number" min="1" max="50" value="10" class="mono" /></label>
        <label>Min <input id="min" type="number" min="0" max="1" step="0.01" value="0.33" class="mono" /></label>
      </div>
      <div id="stats" class="meta">Ready.</div>
      <div class="results">
        <div class="row head"><div>#</div><div>Score</div><div>Value</div></div>
        <div id="out" class="empty">Start typing to see results.</div>
      </div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), out = $("#out"), stats = $("#stats"), k = $("#k"), min = $("#min");
let t; // debounce timer
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }

async function search(){
  const query = q.value;
  if(query.trim().length === 0){
    out.className = "empty"; out.innerHTML = "Start typing to see results."; stats.textContent = "Ready.";
    return;
  }
  try{
    const resp = await fetch(`/api/lookup?q=${encodeURIComponent(query)}&k=${k.value}&min=${min.value}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    stats.textContent = `Results: ${data.length}`;
    if(data.length === 0){ out.className = "empty"; out.innerHTML = "No matches."; return; }
    out.className = "";
    out.innerHTML = data.map(r => `
      <div class="row" title="${esc(r.source_text || "")}">
        <div>${r.rank}</div><div class="mono">${r.score.toFixed(3)}</div><div>${esc(r.value)}</div>
      </div>`).join("");
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
}

function debouncedSearch(){ clearTimeout(t); t = setTimeout(search, 150); }
q.addEventListener("input", debouncedSearch);
k.addEventListener("change", debouncedSearch);
min.addEventListener("change", debouncedSearch);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--roots", nargs="+", default=[])
    ap.add_argument("--entries", nargs="+", default=[])
    ap.add_argument("--no-levenshtein", action="store_true")
    ap.add_argument("--gram-lower", type=int, default=None)
    ap.add_argument("--gram-upper", type=int, default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    if not args.roots and not args.entries:
        ap.error("one of --roots or --entries is required")

    global _engine
    eng = Engine()
    try:
        eng.build(
            roots=args.roots, entries=args.entries,
            use_levenshtein=not args.no_levenshtein,
            gram_size_lower=args.gram_lower, gram_size_upper=args.gram_upper,
            verbose=args.verbose,
        )
    except ValueError as exc:
        ap.error(str(exc))
    _engine = eng
    log.info("Serving %d entries on http://%s:%d", _engine.size(), args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
