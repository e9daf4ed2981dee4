"""
Employee Directory Views

Server-rendered pages for the employee directory. The views are thin: they
call ``EmployeeDirectoryService`` and translate its outcomes into templates,
redirects, flash messages (``django.contrib.messages``) and 404 responses.

Pages:
- GET  /Employees                 - list, ordered by full name
- GET  /Employees/Details/<id>    - details
- GET  /Employees/Create          - empty create form
- POST /Employees/Create          - create (CSRF protected)
- GET  /Employees/Edit/<id>       - edit form
- POST /Employees/Edit/<id>       - update (CSRF protected)
- GET  /Employees/Delete/<id>     - delete confirmation
- POST /Employees/Delete/<id>     - delete (CSRF protected)

Author: Employee Directory Team
Version: 1.0.0
"""

from typing import Optional

from django.contrib import messages
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views import View

from .services import EmployeeDirectoryService, Outcome


class DirectoryServiceMixin:
    """Provides a directory service instance per request."""

    def get_service(self) -> EmployeeDirectoryService:
        return EmployeeDirectoryService.default()

    def not_found(self) -> Http404:
        return Http404("Employee not found")

    def render_lookup(
        self, request: HttpRequest, outcome: Outcome, template_name: str
    ) -> HttpResponse:
        """
        Render ``template_name`` for a successful lookup.

        Not found raises 404; a store failure redirects to the list with a
        flash message.
        """
        if outcome.not_found:
            raise self.not_found()
        if not outcome.ok:
            messages.error(request, outcome.message)
            return redirect("employees:index")

        context = {"employee": outcome.employee}
        if outcome.form is not None:
            context["form"] = outcome.form
        return render(request, template_name, context)


class EmployeeListView(DirectoryServiceMixin, View):
    template_name = "employees/index.html"

    def get(self, request: HttpRequest) -> HttpResponse:
        outcome = self.get_service().list_employees()
        if outcome.message:
            messages.error(request, outcome.message)
        return render(request, self.template_name, {"employees": outcome.employees})


class EmployeeDetailView(DirectoryServiceMixin, View):
    template_name = "employees/details.html"

    def get(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        outcome = self.get_service().get_by_id(pk)
        return self.render_lookup(request, outcome, self.template_name)


class EmployeeCreateView(DirectoryServiceMixin, View):
    template_name = "employees/create.html"

    def get(self, request: HttpRequest) -> HttpResponse:
        outcome = self.get_service().prepare_create_form()
        if not outcome.ok:
            messages.error(request, outcome.message)
            return redirect("employees:index")
        return render(request, self.template_name, {"form": outcome.form})

    def post(self, request: HttpRequest) -> HttpResponse:
        outcome = self.get_service().create(request.POST)
        if outcome.ok:
            messages.success(request, outcome.message)
            return redirect("employees:index")

        if outcome.message:
            messages.error(request, outcome.message)
        return render(request, self.template_name, {"form": outcome.form})


class EmployeeEditView(DirectoryServiceMixin, View):
    template_name = "employees/edit.html"

    def get(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        outcome = self.get_service().get_for_edit(pk)
        return self.render_lookup(request, outcome, self.template_name)

    def post(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        outcome = self.get_service().update(pk, request.POST)
        if outcome.not_found:
            raise self.not_found()
        if outcome.ok:
            messages.success(request, outcome.message)
            return redirect("employees:index")

        if outcome.message:
            messages.error(request, outcome.message)
        return render(request, self.template_name, {"form": outcome.form})


class EmployeeDeleteView(DirectoryServiceMixin, View):
    template_name = "employees/delete.html"

    def get(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        outcome = self.get_service().get_for_delete(pk)
        return self.render_lookup(request, outcome, self.template_name)

    def post(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        outcome = self.get_service().confirm_delete(pk)
        if outcome.not_found:
            raise self.not_found()
        if outcome.ok:
            messages.success(request, outcome.message)
            return redirect("employees:index")

        messages.error(request, outcome.message)
        return redirect("employees:delete", pk=pk)
