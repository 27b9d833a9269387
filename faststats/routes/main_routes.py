import logging

from flask import render_template, request
from . import main_bp
from ..exceptions import NotFoundError, QueryError, ValidationError
from ..queries import aggregate_results, resolve_names

logger = logging.getLogger(__name__)


@main_bp.route('/')
def home():
    return render_template('home.html')


@main_bp.route('/about')
def about():
    return render_template('about.html')


@main_bp.route('/search')
def search_page():
    name = request.args.get('name', '')
    try:
        found = resolve_names(name, request.args.get('page'))
    except ValidationError:
        return "400 - Search name must be at least 3 characters", 400
    except QueryError:
        logger.exception("error fetching names")
        return "500 - Uh oh", 500
    return render_template('search.html', found=found)


@main_bp.route('/results')
def results_page():
    names = request.args.getlist('name')
    if len(names) != 1:
        return "400 - Bad Request - Missing/too many name parameter!", 400
    hometowns = request.args.getlist('hometown')
    if len(hometowns) != 1:
        return "400 - Bad Request - Missing/too many hometown parameter!", 400

    try:
        summary = aggregate_results(names[0], hometowns[0])
    except NotFoundError:
        return "404 - No results for this lifter", 404
    except QueryError:
        logger.exception("error fetching results")
        return "500 - Uh oh", 500
    return render_template('results.html', summary=summary)
