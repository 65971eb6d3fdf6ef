# participants
COL_PARTICIPANT_ID = "participant_id"
COL_PLZ = "plz"
COL_EMPLOYMENT_STATUS = "employment_status"
COL_SEMESTER = "semester"
COL_VL = "vl"
COL_DAYS_PRESENT = "days_present"

# vehicles
COL_SEMESTER_TIME = "semester_time"
COL_VEHICLE = "vehicle"
COL_DISTANCE_KM = "distance_km"
COL_DISTANCE_KM_WEEK = "distance_km_week"
COL_HAS_CHANGED = "has_changed"
COL_IS_MAIN_VEHICLE = "is_main_vehicle"
COL_CAR_TECHNOLOGY = "car_technology"

FIELDS = [
    COL_PARTICIPANT_ID,
    COL_PLZ,
    COL_EMPLOYMENT_STATUS,
    COL_SEMESTER,
    COL_VL,
    COL_SEMESTER_TIME,
    COL_DAYS_PRESENT,
    COL_VEHICLE,
    COL_DISTANCE_KM,
    COL_DISTANCE_KM_WEEK,
    COL_HAS_CHANGED,
    COL_IS_MAIN_VEHICLE,
    COL_CAR_TECHNOLOGY,
]

# aggregates
COL_PERIOD = "period"
COL_VEHICLE_LABEL = "vehicle_label"
COL_VEHICLE_RANK = "vehicle_rank"
COL_GROUP = "group"
COL_GROUP_LABEL = "group_label"
COL_GROUP_RANK = "group_rank"
COL_COUNT = "count"
COL_PEOPLE = "people"
COL_SHARE = "share"

SENTINEL_RANK = 999
