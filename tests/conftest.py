from decimal import Decimal

import pytest
from config import Config
from faststats import create_app, db


class TestConfig(Config):
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    TESTING = True
    SQLALCHEMY_ENGINE_OPTIONS = {'connect_args': {'check_same_thread': False}}


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _dec(value):
    return None if value is None else Decimal(str(value))


def add_result(lifter, hometown, date='2019-01-01', sn=(0, 0, 0), cj=(0, 0, 0),
               total=None, best_snatch=None, best_cleanjerk=None,
               competition_weight='81.00', weight_class='81', meet_name='Test Open',
               url='https://example.com/meet?id=1'):
    from faststats.models import Result

    result = Result(
        date=date,
        meet_name=meet_name,
        lifter=lifter,
        weight_class=weight_class,
        competition_weight=_dec(competition_weight),
        hometown=hometown,
        sn1=_dec(sn[0]),
        sn2=_dec(sn[1]),
        sn3=_dec(sn[2]),
        cj1=_dec(cj[0]),
        cj2=_dec(cj[1]),
        cj3=_dec(cj[2]),
        total=_dec(total),
        best_snatch=_dec(best_snatch),
        best_cleanjerk=_dec(best_cleanjerk),
        url=url,
    )
    db.session.add(result)
    return result


def seed_osorio():
    # newest first: 2020-11-20, 2019-06-01, 2018-03-10
    add_result("D'Angelo Osorio", 'Vallejo, CA', date='2019-06-01',
               sn=('100', '-105', '105'), cj=('130', '135', '-140'),
               total='240', best_snatch='105', best_cleanjerk='135', competition_weight='88.40')
    add_result("D'Angelo Osorio", 'Vallejo, CA', date='2018-03-10',
               sn=('95', '100', '-104'), cj=('120', '125', '130'),
               total='230', best_snatch='100', best_cleanjerk='130', competition_weight='87.10')
    add_result("D'Angelo Osorio", 'Vallejo, CA', date='2020-11-20',
               sn=('102', '-106', '-106'), cj=('135', '-140', '0'),
               total='237', best_snatch='102', best_cleanjerk='135', competition_weight='89.00')
    db.session.commit()


def seed_lifters(count, first='Steph', hometown='Town, ST'):
    for idx in range(count):
        add_result(f'{first} Lifter{idx:03d}', hometown, total='100')
    db.session.commit()


@pytest.fixture
def count_queries(app):
    """Collect the SQL statements executed while the test runs."""
    from sqlalchemy import event

    statements = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(db.engine, 'before_cursor_execute', before_cursor_execute)
    yield statements
    event.remove(db.engine, 'before_cursor_execute', before_cursor_execute)
