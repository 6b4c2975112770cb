from issuetree import ErrorManager, IssueRef, ParserConfig, get_due_date

ISSUE_URL = 'https://github.com/o/r/issues/1'


def test_eta_found_in_rendered_body() -> None:
    errors = ErrorManager()
    issue = IssueRef(body_html='<p>children:</p><ul><li>x</li></ul><p dir="auto">eta: 2023Q2</p>', html_url=ISSUE_URL)
    assert get_due_date(issue, errors) == {'eta': '2023Q2'}
    assert not errors


def test_eta_in_nested_markup() -> None:
    issue = IssueRef(body_html='<div><p>Some</p><p>ETA: 2024-01-15</p></div>', html_url=ISSUE_URL)
    assert get_due_date(issue, ErrorManager()) == {'eta': '2024-01-15'}


def test_missing_eta_is_reported_once_for_child_issue() -> None:
    errors = ErrorManager()
    issue = IssueRef(body_html='<p>no date</p>', html_url=ISSUE_URL, title='Child')
    assert get_due_date(issue, errors) == {'eta': ''}
    assert len(errors) == 1
    entry = errors.errors[0]
    assert entry.issue is issue
    assert entry.user_guide_section == '#eta'
    assert entry.error_title == 'ETA not found'
    assert entry.error_message == 'ETA not found in issue body'
    assert entry.to_dict()['userGuideSection'] == '#eta'


def test_missing_eta_on_root_issue_is_silent() -> None:
    errors = ErrorManager()
    issue = IssueRef(body_html='<p>no date</p>', html_url=ISSUE_URL, root_issue=True)
    assert get_due_date(issue, errors) == {'eta': ''}
    assert not errors


def test_missing_eta_without_url_is_silent() -> None:
    errors = ErrorManager()
    assert get_due_date(IssueRef(body_html=''), errors) == {'eta': ''}
    assert len(errors) == 0


def test_user_guide_section_is_configurable() -> None:
    errors = ErrorManager()
    get_due_date(IssueRef(html_url=ISSUE_URL), errors, ParserConfig(eta_user_guide_section='#due'))
    assert errors.errors[0].user_guide_section == '#due'


def test_error_manager_clear() -> None:
    errors = ErrorManager()
    get_due_date(IssueRef(html_url=ISSUE_URL), errors)
    get_due_date(IssueRef(html_url=ISSUE_URL), errors)
    assert len(errors) == 2
    errors.clear()
    assert errors.errors == []


def test_unparseable_body_counts_as_missing_eta(monkeypatch) -> None:
    def _boom(_html: str) -> None:
        raise RuntimeError('markup backend failed')

    monkeypatch.setattr('issuetree.parser.parse_html', _boom)
    errors = ErrorManager()
    issue = IssueRef(body_html='<p>eta: 2024Q1</p>', html_url=ISSUE_URL)
    assert get_due_date(issue, errors) == {'eta': ''}
    assert len(errors) == 1
