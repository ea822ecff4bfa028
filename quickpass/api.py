from flask import Flask, jsonify, request

from quickpass.config import Configuration
from quickpass.generator import generate
from quickpass.strength import score_strength

app = Flask(__name__)


def _config_from_body(data: dict) -> Configuration:
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    defaults = Configuration()
    include_numbers = data.get('include_numbers', defaults.include_numbers)
    include_symbols = data.get('include_symbols', defaults.include_symbols)
    if not isinstance(include_numbers, bool) or not isinstance(include_symbols, bool):
        raise ValueError("include_numbers and include_symbols must be booleans")
    return Configuration(
        length=data.get('length', defaults.length),
        include_numbers=include_numbers,
        include_symbols=include_symbols,
    )


def _strength_json(config: Configuration) -> dict:
    result = score_strength(config.length, config.include_numbers, config.include_symbols)
    return {'percent': result.percent, 'label': result.label}


@app.route('/')
def home():
    return jsonify({
        "message": "QuickPass API is running"
    })


@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    try:
        config = _config_from_body(data)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'password': generate(config), 'strength': _strength_json(config)})


@app.route('/strength', methods=['POST'])
def strength_route():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    try:
        config = _config_from_body(data)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(_strength_json(config))


if __name__ == "__main__":
    app.run(debug=True)
