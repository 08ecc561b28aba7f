"""Forms for the game package."""

from wtforms import (
    BooleanField,
    DateField,
    FieldList,
    Form,
    FormField,
    StringField,
    TimeField,
)

from rallybook.core import validators as rules
from rallybook.core.forms import raise_for

from .models import CourtSchedule, GameSubmission


class ScheduleForm(Form):
    """Sub-form for a single court booking."""

    court_number = StringField("Court")
    date = DateField("Date")
    start_time = TimeField("Start Time")
    end_time = TimeField("End Time")

    def validate(self, extra_validators=None):
        """Validate the booking as a whole once each field has parsed."""
        if not super().validate(extra_validators=extra_validators):
            return False

        error = rules.validate_schedule_entry(
            self.court_number.data,
            self.date.data,
            self.start_time.data,
            self.end_time.data,
        )
        if error:
            self.end_time.errors.append(error)
            return False
        return True

    def to_schedule(self) -> CourtSchedule:
        return CourtSchedule.for_date(
            self.court_number.data or "",
            self.date.data,
            self.start_time.data,
            self.end_time.data,
        )


class GameForm(Form):
    """Form for creating or editing a game session."""

    title = StringField("Title")
    court_name = StringField("Court Name")
    schedules = FieldList(FormField(ScheduleForm), min_entries=0)
    court_rate = StringField("Court Rate (per hour)")
    shuttle_price = StringField("Shuttle Cock Price")
    divide_equally = BooleanField("Divide Court Cost Equally", default=True)

    def validate_court_name(self, field):
        raise_for(rules.validate_court_name(field.data))

    def validate_schedules(self, field):
        raise_for(rules.validate_schedules_non_empty(len(field.entries)))

    def validate_court_rate(self, field):
        raise_for(rules.validate_positive_number(field.data, "Court rate"))

    def validate_shuttle_price(self, field):
        raise_for(rules.validate_positive_number(field.data, "Shuttle cock price"))

    def to_submission(self, player_ids=None) -> GameSubmission:
        """Build the service input from validated form data."""
        return GameSubmission(
            title=self.title.data or "",
            court_name=self.court_name.data or "",
            schedules=[entry.form.to_schedule() for entry in self.schedules],
            court_rate=rules.parse_number(self.court_rate.data) or 0.0,
            shuttle_price=rules.parse_number(self.shuttle_price.data) or 0.0,
            divide_equally=bool(self.divide_equally.data),
            player_ids=player_ids,
        )
