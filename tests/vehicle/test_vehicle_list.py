import unittest
from datetime import date

from rental.services import RentalSystem
from rental.services.errors import NotFoundError


class TestVehicleList(unittest.TestCase):
    """Test suite for enumerating and looking up vehicles."""

    def setUp(self):
        self.system = RentalSystem()
        self.sedan = self.system.vehicles.add_vehicle("Car", "Sedan", 50)
        self.scooter = self.system.vehicles.add_vehicle("Bike", "Scooter", 15)
        self.van = self.system.vehicles.add_vehicle("Van", "Transit", 80)

    def test_list_empty(self):
        """Test a fresh context has no vehicles."""
        self.assertEqual(RentalSystem().vehicles.list_vehicles(), [])

    def test_list_insertion_order(self):
        """Test vehicles come back in the order they were added."""
        ids = [v.id for v in self.system.vehicles.list_vehicles()]
        self.assertEqual(ids, [1, 2, 3])

    def test_list_is_restartable(self):
        """Test listing twice yields the same sequence."""
        first = self.system.vehicles.list_vehicles()
        second = self.system.vehicles.list_vehicles()
        self.assertEqual(first, second)

    def test_list_after_removal_keeps_order(self):
        self.system.vehicles.remove_vehicle(self.scooter.id)
        ids = [v.id for v in self.system.vehicles.list_vehicles()]
        self.assertEqual(ids, [1, 3])

    def test_list_reflects_availability(self):
        """Test a booked vehicle stays listed but shows as unavailable."""
        customer = self.system.customers.add_customer("Bob", "555-2222")
        self.system.bookings.book(self.scooter.id, customer.id, date(2024, 3, 1), date(2024, 3, 2))

        flags = [v.available for v in self.system.vehicles.list_vehicles()]
        self.assertEqual(flags, [True, False, True])

    def test_get_vehicle(self):
        self.assertIs(self.system.vehicles.get_vehicle(2), self.scooter)

    def test_get_vehicle_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.system.vehicles.get_vehicle(42)
        self.assertIn("42", str(ctx.exception))

    def test_get_vehicle_bool_id(self):
        """Test True is not taken as vehicle 1."""
        with self.assertRaises(NotFoundError):
            self.system.vehicles.get_vehicle(True)

    def test_get_vehicle_string_id(self):
        with self.assertRaises(NotFoundError):
            self.system.vehicles.get_vehicle("1")


if __name__ == '__main__':
    unittest.main()
