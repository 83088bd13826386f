"""Single-page form rendered by GET /."""

PAGE_TEMPLATE = """
<!DOCTYPE html>
<html lang="{{ lang }}" dir="{{ dir }}">
<head>
    <meta charset="utf-8">
    <title>VYRA</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 30px; background: #f4f1ee; }
        .card { background: white; border-radius: 10px; border: 1px solid #ddd; padding: 20px; margin-top: 20px; }
        .grid { display: grid; grid-template-columns: repeat(2, 1fr); gap: 12px; }
        .label { display: block; margin-top: 12px; font-weight: bold; }
        .input { width: 100%; padding: 8px; margin-top: 5px; box-sizing: border-box; }
        .btn { padding: 10px 20px; margin-top: 20px; font-weight: bold; }
        .warn { color: #a15c00; font-size: 0.9em; }
        .suggestion { border-top: 1px solid #eee; padding: 10px 0; }
        .s-header { display: flex; justify-content: space-between; }
        .kw { display: inline-block; background: #eee; border-radius: 4px; padding: 2px 6px; margin: 2px; }
        .muted { color: #888; }
    </style>
</head>
<body>
    <header>
        <h1>VYRA</h1>
        <a href="/?lang={{ other_lang }}">{{ labels.switchLanguage }}</a>
        <p class="subtitle">{{ labels.title }}</p>
    </header>

    <main>
        <form class="card" id="style-form">
            <label class="label" for="api_key">{{ labels.pasteKey }}</label>
            <input class="input" id="api_key" name="api_key" placeholder="{{ labels.pasteKey }}" autocomplete="off">

            <div class="grid">
                {% for field in ["gender", "occasion", "style", "budget"] %}
                <div>
                    <label class="label" for="{{ field }}">{{ labels[field] }}</label>
                    <select class="input" id="{{ field }}" name="{{ field }}">
                        {% for value, text in options[field].items() %}
                        <option value="{{ value }}" {% if value == defaults[field] %}selected{% endif %}>{{ text }}</option>
                        {% endfor %}
                    </select>
                </div>
                {% endfor %}
            </div>

            <button class="btn primary" type="submit" id="generate">{{ labels.generate }}</button>
            <button class="btn" type="button" id="clear">{{ labels.clear }}</button>
            <p class="warn">{{ labels.warning }}</p>
        </form>

        <div class="results card">
            <h3>{{ labels.results }}</h3>
            <div id="results"><p class="muted">{{ labels.empty }}</p></div>
        </div>
    </main>

    <footer><small>VYRA &bull; AI Stylist</small></footer>

    <script>
    const LABELS = {{ labels|tojson }};
    const form = document.getElementById("style-form");
    const results = document.getElementById("results");
    const generate = document.getElementById("generate");

    function showEmpty() {
        results.innerHTML = "";
        const p = document.createElement("p");
        p.className = "muted";
        p.textContent = LABELS.empty;
        results.appendChild(p);
    }

    function render(suggestions) {
        results.innerHTML = "";
        suggestions.forEach(function (s) {
            const card = document.createElement("div");
            card.className = "suggestion";
            const header = document.createElement("div");
            header.className = "s-header";
            const name = document.createElement("strong");
            name.textContent = s.name;
            const price = document.createElement("span");
            price.textContent = s.price_label;
            header.append(name, price);
            const list = document.createElement("ul");
            s.items.forEach(function (it) {
                const li = document.createElement("li");
                li.textContent = it;
                list.appendChild(li);
            });
            const caption = document.createElement("p");
            caption.textContent = s.caption;
            const keywords = document.createElement("div");
            s.supplier_keywords.forEach(function (k) {
                const kw = document.createElement("span");
                kw.className = "kw";
                kw.textContent = k;
                keywords.appendChild(kw);
            });
            card.append(header, list, caption, keywords);
            results.appendChild(card);
        });
    }

    form.addEventListener("submit", async function (e) {
        e.preventDefault();
        const payload = Object.fromEntries(new FormData(form).entries());
        if (!payload.api_key || payload.api_key.trim().length < 10) {
            alert("Please paste your OpenAI API key first.");
            return;
        }
        generate.disabled = true;
        generate.textContent = LABELS.generating;
        showEmpty();
        try {
            const resp = await fetch("/api/generate-outfits", {
                method: "POST",
                headers: {"Content-Type": "application/json"},
                body: JSON.stringify(payload)
            });
            const data = await resp.json();
            if (!resp.ok) {
                throw new Error(data.message || resp.status);
            }
            render(data.suggestions);
        } catch (err) {
            alert("Error: " + (err.message || String(err)));
        } finally {
            generate.disabled = false;
            generate.textContent = LABELS.generate;
        }
    });

    document.getElementById("clear").addEventListener("click", function () {
        document.getElementById("api_key").value = "";
        showEmpty();
    });
    </script>
</body>
</html>
"""
