import logging

from flask import jsonify, request
from . import api_bp
from ..exceptions import NotFoundError, QueryError, ValidationError
from ..queries import aggregate_results, resolve_names

logger = logging.getLogger(__name__)


def _single_arg(name):
    values = request.args.getlist(name)
    if len(values) != 1:
        return None
    return values[0]


@api_bp.route('/search')
def api_search():
    name = request.args.get('name', '')
    page = request.args.get('page')
    try:
        found = resolve_names(name, page)
    except ValidationError as exc:
        return jsonify({'error': str(exc)}), 400
    except QueryError:
        logger.exception("error fetching names")
        return jsonify({'error': 'internal error'}), 500
    return jsonify(found.to_dict())


@api_bp.route('/results')
def api_results():
    name = _single_arg('name')
    if name is None:
        return jsonify({'error': 'exactly one name parameter is required'}), 400
    hometown = _single_arg('hometown')
    if hometown is None:
        return jsonify({'error': 'exactly one hometown parameter is required'}), 400

    try:
        summary = aggregate_results(name, hometown)
    except NotFoundError as exc:
        return jsonify({'error': str(exc)}), 404
    except QueryError:
        logger.exception("error fetching results")
        return jsonify({'error': 'internal error'}), 500
    return jsonify(summary.to_dict())
