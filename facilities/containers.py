from rest_framework.exceptions import MethodNotAllowed

from core.containers import EntityContainer

from .models import Admission, Ward
from .services import admissions, wards


class WardContainer(EntityContainer):
    """Wards with their beds; removal is refused while any bed is occupied."""
    model = Ward
    entity_type = "Ward"

    def load(self, **filters):
        return wards.list_wards()

    def create_entity(self, data):
        return wards.create_ward(data)

    def update_entity(self, pk, data):
        return wards.update_ward(pk, data)

    def delete_entity(self, pk):
        wards.delete_ward(pk)

    def add_bed(self, pk, label):
        return self.act(lambda key: wards.add_bed(key, label), pk,
                        lambda ward: (f"Added bed {label} to ward {ward.name}", "BedDouble"))

    def remove_bed(self, pk, bed_pk):
        bed = wards.get_bed(pk, bed_pk)
        return self.act(lambda key: wards.delete_bed(key, bed_pk), pk,
                        lambda ward: (f"Removed bed {bed.label} from ward {ward.name}", "BedDouble"))

    def describe_created(self, entity):
        return f"Created ward {entity.name} with {entity.beds.count()} beds", "Building"

    def describe_updated(self, entity, data):
        return f"Updated ward {entity.name} ({entity.beds.count()} beds)", "Edit"

    def describe_removed(self, pk, entity):
        name = entity.name if entity else pk
        return f"Deleted ward {name}", "Trash2"

    def link_for(self, pk):
        return "/dashboard/admin/ward-management"

    def matches(self, instance):
        return True


class AdmissionContainer(EntityContainer):
    model = Admission
    entity_type = "Admission"

    def load(self, **filters):
        return admissions.list_admissions(**filters)

    def create_entity(self, data):
        return admissions.admit(data)

    def update_entity(self, pk, data):
        return admissions.update_admission(pk, data)

    def remove(self, pk):
        raise MethodNotAllowed("DELETE", detail="Admissions are discharged, not deleted.")

    def discharge(self, pk, discharge_date=None):
        return self.act(lambda key: admissions.discharge(key, discharge_date), pk, lambda adm: (
            f"Discharged {adm.patient_name} from {adm.ward_name} / {adm.bed_label}", "LogOut"))

    def transfer(self, pk, bed_pk):
        return self.act(lambda key: admissions.transfer(key, bed_pk), pk, lambda adm: (
            f"Transferred {adm.patient_name} to {adm.ward_name} / {adm.bed_label}", "ArrowRightLeft"))

    def describe_created(self, entity):
        return f"Admitted {entity.patient_name} to {entity.ward_name} / {entity.bed_label}", "BedDouble"

    def describe_updated(self, entity, data):
        return f"Updated admission for {entity.patient_name}. Status: {entity.get_status_display()}", "Edit"

    def link_for(self, pk):
        return f"/dashboard/admissions/{pk}"

    def matches(self, instance):
        f = self._filters
        return all((
            not f.get("patient_id") or str(instance.patient_id) == str(f["patient_id"]),
            not f.get("ward_id") or str(instance.ward_id) == str(f["ward_id"]),
            not f.get("status") or instance.status == f["status"],
        ))
