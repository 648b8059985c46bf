import re
from datetime import date

from models import Transaction


def _form(csrf_token, **overrides):
    form = {
        "csrf_token": csrf_token,
        "date": date.today().isoformat(),
        "amount": "75000",
        "category": "Needs",
        "subcategory": "Food & Groceries",
        "description": "Weekly groceries",
        "payment_method": "Card",
        "is_expense": "1",
    }
    form.update(overrides)
    return form


def _add(db, amount=-50.0, category="Wants", day=None, description="Cinema"):
    tx = Transaction(
        date=day or date.today(),
        amount=amount,
        category=category,
        subcategory="Entertainment",
        description=description,
    )
    db.add(tx)
    db.commit()
    db.refresh(tx)
    return tx


def test_root_redirects_to_dashboard(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/dashboard"


def test_empty_dashboard_shows_no_data_pie_and_flat_trend(client):
    response = client.get("/dashboard")

    assert response.status_code == 200
    assert response.text.count("<svg ") == 2
    # only the pie is empty; the trend still has six zero-expense months
    assert response.text.count(">No data</text>") == 1
    heights = re.findall(r'<circle cx="[^"]+" cy="([^"]+)"', response.text)
    assert heights == ["260"] * 6
    assert "No transactions found." in response.text


def test_add_transaction(client, db, csrf_token):
    response = client.post("/transactions", data=_form(csrf_token))

    assert response.status_code == 200
    assert "Transaction added successfully!" in response.text
    (tx,) = db.query(Transaction).all()
    assert tx.amount == -75000
    assert tx.category == "Needs"
    assert tx.payment_method == "Card"
    # current-month expense shows up in the pie chart
    assert ">100%</text>" in response.text
    assert "Rp 75.000" in response.text


def test_add_income(client, db, csrf_token):
    client.post("/transactions", data=_form(csrf_token, is_expense="0"))
    (tx,) = db.query(Transaction).all()
    assert tx.amount == 75000


def test_post_without_csrf_token_is_rejected(client, db):
    response = client.post("/transactions", data=_form("not-the-token"))

    assert "Invalid security token. Please try again." in response.text
    assert db.query(Transaction).count() == 0


def test_non_finite_amount_is_rejected(client, db, csrf_token):
    response = client.post("/transactions", data=_form(csrf_token, amount="1e999"))

    assert "Valid amount is required" in response.text
    assert db.query(Transaction).count() == 0
    assert client.get("/dashboard").status_code == 200


def test_validation_errors_are_flashed(client, db, csrf_token):
    response = client.post("/transactions", data=_form(csrf_token, amount="", category="Luxury"))

    assert "Valid amount is required" in response.text
    assert "Valid category is required" in response.text
    assert db.query(Transaction).count() == 0


def test_description_is_escaped_in_table(client, db, csrf_token):
    client.post("/transactions", data=_form(csrf_token, description="<script>alert(1)</script>"))
    response = client.get("/dashboard")

    assert "<script>alert(1)</script>" not in response.text
    assert "&lt;script&gt;" in response.text


def test_edit_form_and_update(client, db, csrf_token):
    tx = _add(db)

    page = client.get(f"/transactions/{tx.id}/edit")
    assert page.status_code == 200
    assert "Cinema" in page.text

    response = client.post(
        f"/transactions/{tx.id}/edit",
        data=_form(csrf_token, amount="60", category="Wants", subcategory="Shopping"),
    )
    assert "Transaction updated successfully!" in response.text

    db.expire_all()
    updated = db.get(Transaction, tx.id)
    assert updated.amount == -60
    assert updated.subcategory == "Shopping"


def test_edit_unknown_transaction_redirects(client):
    response = client.get("/transactions/9999/edit", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard"


def test_delete_transaction(client, db, csrf_token):
    tx = _add(db)

    response = client.post(f"/transactions/{tx.id}/delete", data={"csrf_token": csrf_token})

    assert "Transaction deleted successfully!" in response.text
    assert db.query(Transaction).count() == 0


def test_delete_requires_csrf(client, db):
    tx = _add(db)
    client.post(f"/transactions/{tx.id}/delete", data={"csrf_token": ""})
    assert db.query(Transaction).count() == 1


def test_dashboard_filters(client, db):
    _add(db, description="Cinema tickets")
    _add(db, category="Needs", description="Electricity bill")

    response = client.get("/dashboard", params={"search": "cinema"})
    assert "Cinema tickets" in response.text
    assert "Electricity bill" not in response.text

    response = client.get("/dashboard", params={"category": "Needs"})
    assert "Electricity bill" in response.text
    assert "Cinema tickets" not in response.text


def test_export_csv(client, db):
    _add(db, description="Cinema tickets", day=date(2025, 3, 1))
    _add(db, category="Needs", description="Rent", day=date(2025, 4, 1))

    response = client.get("/export.csv", params={"end_date": "2025-03-31"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment; filename=\"finance_export_" in response.headers["content-disposition"]
    body = response.content.decode("utf-8")
    assert body.startswith("\ufeffDate;Amount;Category")
    assert "Cinema tickets" in body
    assert "Rent" not in body


def test_export_csv_post_requires_csrf(client, db, csrf_token):
    _add(db)

    ok = client.post("/export.csv", data={"csrf_token": csrf_token, "category": "Wants"})
    assert ok.headers["content-type"].startswith("text/csv")

    rejected = client.post("/export.csv", data={"csrf_token": "bad"})
    assert rejected.headers["content-type"].startswith("text/html")


def test_subcategories_api(client):
    response = client.get("/api/subcategories", params={"category": "Culture"})
    assert response.json() == {
        "category": "Culture",
        "subcategories": ["Books & Media", "Education", "Hobbies"],
    }


def test_chart_svg_endpoints(client, db):
    _add(db, amount=-100, category="Needs")
    _add(db, amount=-300, category="Wants")

    pie = client.get("/charts/expenses-by-category.svg", params={"width": 300, "height": 300})
    assert pie.headers["content-type"].startswith("image/svg+xml")
    assert pie.text.startswith('<svg width="300" height="300"')
    assert ">75%</text>" in pie.text
    assert ">25%</text>" in pie.text

    line = client.get("/charts/expense-trend.svg", params={"months": 3})
    assert line.text.count("<circle ") == 3


def test_chart_svg_rejects_tiny_canvas(client):
    response = client.get("/charts/expense-trend.svg", params={"width": 10})
    assert response.status_code == 422
