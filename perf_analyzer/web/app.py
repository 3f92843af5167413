"""
Flask web application for the performance analyzer.

Provides a JSON API over the analysis engine.
"""

import asyncio
from typing import Callable, Optional

from flask import Flask, request, jsonify

from .. import __version__
from ..endpoints import API_CATEGORIES, filter_endpoints
from ..engine import PerformanceAnalyzer
from ..errors import AnalysisError, ConfigurationError, ValidationError
from ..utils.config import thresholds_from_env
from ..utils.log import get_logger
from ..utils.urls import ensure_scheme


ANALYSIS_MODES = ('page', 'api')


def create_app(analyzer_factory: Optional[Callable[[], PerformanceAnalyzer]] = None):
    """
    Create and configure the Flask application.

    Args:
        analyzer_factory: Builds the analyzer for each request; defaults to
            one using the thresholds named by the environment
    """
    app = Flask(__name__)
    logger = get_logger("web")

    if analyzer_factory is None:
        thresholds = thresholds_from_env()

        def analyzer_factory():
            return PerformanceAnalyzer(thresholds=thresholds)

    app.analyzer_factory = analyzer_factory

    @app.route('/api/health')
    def health():
        """Simple liveness check."""
        return jsonify({'status': 'ok', 'version': __version__})

    @app.route('/api/endpoints')
    def list_endpoints():
        """List sample API endpoints, optionally filtered by category."""
        category = request.args.get('category')
        endpoints = filter_endpoints(category)
        return jsonify({
            'categories': list(API_CATEGORIES),
            'endpoints': [e.to_dict() for e in endpoints],
        })

    @app.route('/api/thresholds')
    def get_thresholds():
        """Return the threshold table used for scoring."""
        return jsonify(app.analyzer_factory().thresholds.to_dict())

    @app.route('/api/analyze', methods=['POST'])
    def analyze():
        """Run one page or API analysis."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            return jsonify({'error': 'Request body must be a JSON object'}), 400

        raw_url = data.get('url')
        if not isinstance(raw_url, str) or not raw_url.strip():
            return jsonify({'error': 'URL is required'}), 400
        url = ensure_scheme(raw_url)

        mode = data.get('mode', 'page')
        if mode not in ANALYSIS_MODES:
            return jsonify({'error': f"Mode must be one of: {', '.join(ANALYSIS_MODES)}"}), 400

        analyzer = app.analyzer_factory()
        try:
            if mode == 'api':
                metrics = asyncio.run(analyzer.analyze_api(url))
            else:
                metrics = asyncio.run(analyzer.analyze_page(url))
        except (ValidationError, ConfigurationError) as e:
            return jsonify({'error': str(e)}), 400
        except AnalysisError as e:
            logger.info(f"Analysis of {url} failed: {e}")
            return jsonify({'error': str(e), 'status': e.status}), 502

        return jsonify({
            'metrics': metrics.to_dict(),
            'performanceLevel': analyzer.classify(metrics).value,
        })

    return app


def run_app(host: str = '127.0.0.1', port: int = 5000, debug: bool = False):
    """Run the Flask web application."""
    app = create_app()
    app.run(host=host, port=port, debug=debug)
