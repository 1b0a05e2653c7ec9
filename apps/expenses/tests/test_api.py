import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.expenses.models import Expense, Settlement


# =============================================================================
# Expense CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestExpenseList:
    """Tests for GET /api/expenses/"""

    def test_list_room_expenses(self, owner_client, room, owner):
        """List returns the room's expenses with their payer."""
        Expense.objects.create(room=room, description='Rent', amount='100.00', added_by=owner)
        url = reverse('expenses:expense-list')
        response = owner_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['description'] == 'Rent'
        assert response.data[0]['amount'] == '100.00'
        assert response.data[0]['added_by']['display_name'] == 'Owner'

    def test_list_not_in_room(self, outsider_client):
        """Users without a room get 404."""
        url = reverse('expenses:expense-list')
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'You are not in a room.'

    def test_list_unauthenticated(self, api_client):
        """Unauthenticated users cannot list expenses."""
        url = reverse('expenses:expense-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestExpenseCreate:
    """Tests for POST /api/expenses/"""

    def test_create_expense(self, member_client, shared_room, member):
        """Create an expense paid by the current user."""
        url = reverse('expenses:expense-list')
        response = member_client.post(url, {'description': 'Groceries', 'amount': '45.50'})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == '45.50'
        expense = Expense.objects.get(room=shared_room)
        assert expense.added_by == member

    def test_create_negative_amount(self, owner_client, room):
        """Negative amounts are rejected."""
        url = reverse('expenses:expense-list')
        response = owner_client.post(url, {'description': 'Refund', 'amount': '-1'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not Expense.objects.exists()

    @pytest.mark.parametrize('amount', ['NaN', 'Infinity', 'abc'])
    def test_create_non_finite_amount(self, owner_client, room, amount):
        """Non-numeric and non-finite amounts are rejected."""
        url = reverse('expenses:expense-list')
        response = owner_client.post(url, {'description': 'Broken', 'amount': amount})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not Expense.objects.exists()

    def test_create_blank_description(self, owner_client, room):
        url = reverse('expenses:expense-list')
        response = owner_client.post(url, {'description': '   ', 'amount': '5'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_not_in_room(self, outsider_client):
        url = reverse('expenses:expense-list')
        response = outsider_client.post(url, {'description': 'Rent', 'amount': '5'})

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestExpenseDelete:
    """Tests for DELETE /api/expenses/{id}/"""

    def test_payer_deletes_expense(self, member_client, shared_room, member):
        expense = Expense.objects.create(room=shared_room, description='Soap', amount=4, added_by=member)
        url = reverse('expenses:expense-detail', kwargs={'pk': expense.id})
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not Expense.objects.filter(id=expense.id).exists()

    def test_non_payer_member_forbidden(self, member_client, shared_room, owner):
        """Members cannot delete the owner's expenses."""
        expense = Expense.objects.create(room=shared_room, description='Rent', amount=100, added_by=owner)
        url = reverse('expenses:expense-detail', kwargs={'pk': expense.id})
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Expense.objects.filter(id=expense.id).exists()

    def test_delete_missing_expense(self, owner_client, room):
        url = reverse('expenses:expense-detail', kwargs={'pk': uuid4()})
        response = owner_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Balance Endpoint Tests
# =============================================================================

@pytest.mark.django_db
class TestSplit:
    """Tests for GET /api/expenses/split/"""

    def test_split_summary(self, owner_client, shared_room, owner):
        Expense.objects.create(room=shared_room, description='Rent', amount=100, added_by=owner)
        url = reverse('expenses:expense-split')
        response = owner_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == '100.00'
        assert response.data['per_head'] == '50.00'
        owes = {row['name']: row['owes'] for row in response.data['balances']}
        assert owes == {'Owner': '-50.00', 'Member': '50.00'}

    def test_split_empty_ledger(self, owner_client, room):
        url = reverse('expenses:expense-split')
        response = owner_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == '0.00'
        assert response.data['balances'][0]['owes'] == '0.00'

    def test_split_not_in_room(self, outsider_client):
        url = reverse('expenses:expense-split')
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestChartData:
    """Tests for GET /api/expenses/chart-data/"""

    def test_chart_data(self, member_client, shared_room, owner, member):
        Expense.objects.create(room=shared_room, description='Rent', amount=100, added_by=owner)
        Expense.objects.create(room=shared_room, description='Milk', amount=20, added_by=member)
        url = reverse('expenses:expense-chart-data')
        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data'] == {'Owner': '100.00', 'Member': '20.00'}

    def test_chart_data_hides_zero_contributors(self, owner_client, shared_room, owner):
        Expense.objects.create(room=shared_room, description='Rent', amount=100, added_by=owner)
        url = reverse('expenses:expense-chart-data')
        response = owner_client.get(url)

        assert response.data['data'] == {'Owner': '100.00'}


# =============================================================================
# Settle-up and Ledger Tests
# =============================================================================

@pytest.mark.django_db
class TestSettle:
    """Tests for POST /api/expenses/settle/"""

    def test_settle_up(self, member_client, shared_room, owner, member):
        """Member pays their share and gets the settlement back."""
        Expense.objects.create(room=shared_room, description='Rent', amount=100, added_by=owner)
        url = reverse('expenses:expense-settle')
        response = member_client.post(url)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == '50.00'
        assert response.data['paid_by']['id'] == str(member.id)

    def test_settle_up_nothing_owed(self, owner_client, shared_room, owner):
        """Creditors have nothing to settle."""
        Expense.objects.create(room=shared_room, description='Rent', amount=100, added_by=owner)
        url = reverse('expenses:expense-settle')
        response = owner_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data
        assert not Settlement.objects.exists()

    def test_settle_up_twice(self, member_client, shared_room, owner):
        Expense.objects.create(room=shared_room, description='Rent', amount=100, added_by=owner)
        url = reverse('expenses:expense-settle')

        assert member_client.post(url).status_code == status.HTTP_201_CREATED
        assert member_client.post(url).status_code == status.HTTP_400_BAD_REQUEST
        assert Settlement.objects.count() == 1

    def test_settle_not_in_room(self, outsider_client):
        url = reverse('expenses:expense-settle')
        response = outsider_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestClearLedger:
    """Tests for DELETE /api/expenses/clear/"""

    def test_owner_clears_ledger(self, owner_client, shared_room, owner, member):
        Expense.objects.create(room=shared_room, description='Rent', amount=100, added_by=owner)
        Settlement.objects.create(room=shared_room, paid_by=member, amount=50)
        url = reverse('expenses:expense-clear')
        response = owner_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['expenses_deleted'] == 1
        assert response.data['settlements_deleted'] == 1
        assert not Expense.objects.exists()
        assert not Settlement.objects.exists()

    def test_member_cannot_clear(self, member_client, shared_room, owner):
        Expense.objects.create(room=shared_room, description='Rent', amount=100, added_by=owner)
        url = reverse('expenses:expense-clear')
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Expense.objects.count() == 1
