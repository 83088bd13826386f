import json


def sample_batch_dict(prefix="Look"):
    return {
        "suggestions": [
            {
                "name": f"{prefix} {i}",
                "items": ["linen shirt", "chinos", "loafers", "leather watch"],
                "price_estimate_egp": 1500 + i * 100,
                "caption": "Light layers for warm Cairo evenings.",
                "supplier_keywords": ["linen", "chinos", "loafers"],
            }
            for i in range(1, 4)
        ]
    }


def envelope(content):
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]})


class FakeAIClient:
    """Stands in for AIClient; returns a fixed completion envelope and records prompts."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.prompts = []
        self.keys = []

    def __call__(self, api_key):
        self.keys.append(api_key)
        return self

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return {"text": envelope(self.content), "status_code": 200, "source": "OpenAI"}
