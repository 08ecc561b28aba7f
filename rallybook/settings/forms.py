"""Forms for the settings package."""

from wtforms import BooleanField, Form, StringField

from rallybook.core import validators as rules
from rallybook.core.forms import raise_for


class SettingsForm(Form):
    """Form for editing the default game settings."""

    court_name = StringField("Default Court Name")
    court_rate = StringField("Default Court Rate (per hour)")
    shuttle_price = StringField("Default Shuttle Cock Price")
    divide_equally = BooleanField("Divide Court Cost Equally")

    def validate_court_name(self, field):
        raise_for(rules.validate_court_name(field.data))

    def validate_court_rate(self, field):
        raise_for(rules.validate_positive_number(field.data, "Court rate"))

    def validate_shuttle_price(self, field):
        raise_for(rules.validate_positive_number(field.data, "Shuttle cock price"))

    def to_values(self):
        """Return keyword arguments for ``SettingsStore.update``."""
        return {
            "court_name": self.court_name.data or "",
            "court_rate": rules.parse_number(self.court_rate.data) or 0.0,
            "shuttle_price": rules.parse_number(self.shuttle_price.data) or 0.0,
            "divide_equally": bool(self.divide_equally.data),
        }
