from django import forms

from .models import Todo


class TodoForm(forms.ModelForm):
    class Meta:
        model = Todo
        fields = ["title"]
        widgets = {"title": forms.TextInput(attrs={"placeholder": "What needs to be done?", "autofocus": True})}

    def clean_title(self):
        title = self.cleaned_data["title"].strip()
        if not title:
            raise forms.ValidationError("Title must not be blank.")
        return title
