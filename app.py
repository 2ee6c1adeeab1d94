"""Flask web application for the anime/manga recommender."""

import logging

from flask import Flask, request, jsonify

from config import LOG_LEVEL, PORT
from src.models import RecommendationRequest
from src.services import (
    InvalidRequestError,
    RecommendationService,
    TitleNotFoundError,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Response headers for cross-origin browser clients
CORS_HEADERS = {
    'Access-Control-Allow-Credentials': 'true',
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET,OPTIONS,POST',
    'Access-Control-Allow-Headers': 'X-Requested-With, Content-Type, Accept',
}

recommendation_service = RecommendationService()


@app.after_request
def add_cors_headers(response):
    """Attach CORS headers to every response."""
    response.headers.update(CORS_HEADERS)
    return response


@app.errorhandler(405)
def method_not_allowed(e):
    """Return JSON for unsupported methods."""
    return jsonify({'error': 'Method not allowed'}), 405


@app.route('/api/health')
def health():
    """Health check."""
    return jsonify({'status': 'ok'})


@app.route('/', methods=['OPTIONS', 'POST'])
@app.route('/api/recommend', methods=['OPTIONS', 'POST'])
def recommend():
    """Recommend titles similar to the first title in the request."""
    # CORS preflight
    if request.method == 'OPTIONS':
        return '', 200

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        rec_request = RecommendationRequest.from_dict(data)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    try:
        result = recommendation_service.recommend(rec_request)
        return jsonify(result.to_dict())
    except InvalidRequestError as e:
        return jsonify({'error': str(e)}), 400
    except TitleNotFoundError as e:
        return jsonify({'error': str(e)}), 404
    except Exception as e:
        logger.exception("[api] recommend error")
        return jsonify({
            'error': 'Failed to get recommendations',
            'details': str(e),
        }), 500


if __name__ == '__main__':
    app.run(debug=False, host='0.0.0.0', port=PORT)
