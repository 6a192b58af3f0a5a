def area(**overrides):
    values = {
        "area_name": "Living Room",
        "area_type": "indoor",
        "surface_type": "drywall",
        "square_footage": 320,
        "ceiling_height": 8,
        "number_of_coats": 2,
        "labor_cost": 100,
        "material_cost": 50,
    }
    values.update(overrides)
    return values


def invoice_payload(**overrides):
    values = {
        "id": 7,
        "invoice_number": "INV-0007",
        "title": "Interior Painting",
        "status": "draft",
        "total_amount": 500,
        "payment_terms": "Net 30",
        "project_areas": [area()],
        "payments": [],
    }
    values.update(overrides)
    return values


def create_client(api, **overrides):
    values = {"name": "Jane Homeowner", "email": "jane@example.com", "phone": "555-0101"}
    values.update(overrides)
    response = api.post("/api/clients", json=values)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def create_estimate(api, client_id, title="Interior Painting", areas=None, **overrides):
    values = {
        "client_id": client_id,
        "title": title,
        "project_areas": areas if areas is not None else [
            area(),
            area(area_name="Kitchen", labor_cost=200, material_cost=75),
        ],
    }
    values.update(overrides)
    response = api.post("/api/estimates", json=values)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def create_invoice(api, **estimate_overrides):
    client = create_client(api)
    estimate = create_estimate(api, client["id"], **estimate_overrides)
    api.patch(f"/api/estimates/{estimate['id']}/status", json={"status": "approved"})
    response = api.post(f"/api/estimates/{estimate['id']}/convert", json={"payment_terms": "Net 15"})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeSession:
    """Stands in for requests.Session: replays queued responses, records calls"""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response
