APP_NAME = "markdown-ui"
DATABASE_FILE = "markdown-ui.db"

DIAGRAM_LANGUAGE = "mermaid"
DIAGRAM_SOURCE_CLASS = "diagram-source"
MERMAID_CDN_URL = "https://cdn.jsdelivr.net/npm/mermaid@11/dist/mermaid.min.js"

CSS_LIGHT_VARS = """
:root { --bg:#ffffff; --fg:#111; --muted:#555; --code:#f4f6f8; --border:#ddd; --link:#0b6bfd; }
"""

CSS_DARK_VARS = """
:root { --bg:#0f1115; --fg:#e7e9ee; --muted:#a0a4ae; --code:#1a1d24; --border:#2a2f3a; --link:#7aa2ff; }
"""

CSS_DOCUMENT = """
html,body { background:var(--bg); color:var(--fg); }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1.25rem; line-height: 1.55; }
h1,h2,h3,h4,h5 { margin-top: 1.2em; }
pre { padding:.75rem; overflow:auto; border-radius:8px; background:var(--code); }
code { background:var(--code); padding:.15rem .3rem; border-radius:6px; }
pre code { padding:0; background:none; }
blockquote { border-left:4px solid var(--border); margin:1em 0; padding:.25em .75em; color:var(--muted); }
table { border-collapse: collapse; }
th, td { border:1px solid var(--border); padding:.4rem .6rem; }
a { color:var(--link); text-decoration:none; } a:hover { text-decoration:underline; }
hr { border:none; border-top:1px solid var(--border); margin:1.5rem 0; }
ul,ol { padding-left:1.5rem; }
del { color:var(--muted); }
.task-list-item { list-style-type:none; }
.task-list-item input[type=checkbox] { margin:0 .4em .2em -1.4em; vertical-align:middle; }
.diagram { margin:1em 0; text-align:center; }
.diagram svg { max-width:100%; height:auto; }
pre.diagram-source { white-space:pre-wrap; }
@media print {
  body { margin:0; }
  pre { white-space:pre-wrap; overflow:visible; }
  .diagram, pre, table, img { break-inside:avoid; }
}
"""

HTML_TEMPLATE = """<!doctype html>
<html lang="en" data-theme="{theme}">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<title>{title}</title>
<style>{css}</style>
</head>
<body>
{body}
{scripts}
</body>
</html>
"""

# Renders every pre.diagram-source in place, then flags the body so a headless
# printer knows the page is final. The flag is set even when the runtime did not load.
DIAGRAM_BOOTSTRAP_JS = """
(function () {
  var finish = function () { document.body.dataset.diagramsRendered = "true"; };
  var run = async function () {
    var nodes = Array.prototype.slice.call(document.querySelectorAll("pre.diagram-source"));
    if (!nodes.length || typeof window.mermaid === "undefined") { finish(); return; }
    window.mermaid.initialize({
      startOnLoad: false,
      theme: window.MDUI_DIAGRAM_THEME || "default",
      securityLevel: "loose"
    });
    for (var i = 0; i < nodes.length; i++) {
      var node = nodes[i];
      try {
        var out = await window.mermaid.render("mdui-diagram-svg-" + i, node.textContent);
        var host = document.createElement("div");
        host.className = "diagram";
        host.innerHTML = out.svg;
        host.setAttribute("data-rendered", "true");
        node.replaceWith(host);
      } catch (err) {
        node.setAttribute("data-rendered", "error");
        node.title = String((err && err.message) || err);
      }
    }
    finish();
  };
  var start = function () { run().catch(finish); };
  if (document.readyState === "loading") {
    document.addEventListener("DOMContentLoaded", start);
  } else {
    start();
  }
})();
"""

DIAGRAMS_RENDERED_JS = "() => document.body && document.body.dataset.diagramsRendered === 'true'"
