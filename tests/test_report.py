import io

from setquery import Reporter, Options, union

from . import HEALTHY, JUNK

def test_options_defaults():
    options = Options()
    assert options.verbosity == 0

def test_msg_threshold():
    out = io.StringIO()
    r = Reporter(outstream=out, verbosity=1)
    r.msg('shown')
    r.msg('also shown', thresh=1)
    r.msg('hidden', thresh=2)
    assert out.getvalue().splitlines() == ['shown', 'also shown']

def test_msg_with_query_context():
    out = io.StringIO()
    Reporter(outstream=out).msg('hello', ctx=union(HEALTHY, JUNK))
    assert out.getvalue() == 'union(list, list): hello\n'

def test_timed():
    out = io.StringIO()
    r = Reporter(outstream=out, verbosity=1)
    assert r.timed(union(HEALTHY, JUNK)) == union(HEALTHY, JUNK).to_list()
    assert out.getvalue().startswith('union(list, list): 7 elements in ')

def test_timed_quiet():
    out = io.StringIO()
    Reporter(outstream=out).timed(union(HEALTHY, JUNK))
    assert out.getvalue() == ''
