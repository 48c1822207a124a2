from relay.lib.email_body import Submission, render_contact_html


def test_render_contact_html_layout():
    sub = Submission(name="Ana", email="ana@x.com", message="Hi")
    assert render_contact_html(sub) == "<p>Name: Ana</p><p>Email: ana@x.com</p><p>Message: Hi</p>"


def test_submission_tolerates_missing_and_null_fields():
    sub = Submission.model_validate({"name": None, "email": "ana@x.com"})
    assert (sub.name, sub.email, sub.message) == ("", "ana@x.com", "")


def test_submission_ignores_unknown_keys_and_coerces_numbers():
    sub = Submission.model_validate({"name": 7, "email": "e", "message": "m", "phone": "123"})
    assert sub.name == "7"
    assert not hasattr(sub, "phone")


def test_escape_only_when_requested():
    sub = Submission(name="<b>Ana</b>", email="a&b@x.com", message='"quoted"')

    raw = render_contact_html(sub)
    escaped = render_contact_html(sub, escape=True)

    assert "<b>Ana</b>" in raw
    assert "&lt;b&gt;Ana&lt;/b&gt;" in escaped
    assert "a&amp;b@x.com" in escaped
    assert "&quot;quoted&quot;" in escaped
