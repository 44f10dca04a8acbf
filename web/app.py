"""Bookworm web application, Flask backend."""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on sys.path so `bookworm.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, render_template, request

from bookworm.rack import RackError, parse_rack
from bookworm.solver import RackSolver, ScoredWord
from bookworm.wordlists import load_default_registry

app = Flask(__name__)

# Load dictionaries once at startup; failures are kept for /dictionaries
REGISTRY, LOAD_ERRORS = load_default_registry()
SOLVER = RackSolver(REGISTRY)


def results_to_json(results: dict[str, list[ScoredWord]]) -> dict:
    """Serialize a result set to the JSON format expected by the frontend."""
    return {
        name: [{"word": sw.word, "strength": sw.strength} for sw in words]
        for name, words in results.items()
    }


@app.route("/")
def index():
    return render_template("index.html", dictionaries=REGISTRY.names())


@app.route("/dictionaries")
def dictionaries():
    return jsonify({
        "dictionaries": [
            {"name": name, "word_count": idx.word_count}
            for name, idx in REGISTRY.items()
        ],
        "errors": {name: e.reason for name, e in LOAD_ERRORS.items()},
    })


@app.route("/solve", methods=["POST"])
def solve_route():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400
    raw = data.get("letters", "")
    if not isinstance(raw, str):
        return jsonify({"error": "letters must be a string"}), 400
    try:
        letters = parse_rack(raw)
    except RackError as e:
        return jsonify({"error": str(e)}), 400

    results = SOLVER.find_solutions(letters)
    return jsonify({"letters": letters, "results": results_to_json(results)})


if __name__ == "__main__":
    print(f"Dictionaries loaded: {', '.join(REGISTRY.names()) or 'none'}")
    for name, error in LOAD_ERRORS.items():
        print(f"Failed to load {name}: {error.reason}")
    app.run(debug=True, host="0.0.0.0", port=8080)
