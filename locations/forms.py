from django import forms


class LocationForm(forms.Form):
    Latitude = forms.FloatField(
        widget=forms.NumberInput(attrs={"step": "any", "placeholder": "Latitude"})
    )
    Longitude = forms.FloatField(
        widget=forms.NumberInput(attrs={"step": "any", "placeholder": "Longitude"})
    )

    def payload(self):
        return {
            "Latitude": self.cleaned_data["Latitude"],
            "Longitude": self.cleaned_data["Longitude"],
        }
