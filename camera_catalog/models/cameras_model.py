from camera_catalog import db


class Camera(db.Model):
    __tablename__ = 'cameras'

    # Columns the form knows about; anything else lands in `attributes`
    COLUMNS = ('make', 'model', 'description', 'imageUrl', 'createdBy', 'createdById')

    id = db.Column(db.Integer, primary_key=True)
    make = db.Column(db.String(255))
    model = db.Column(db.String(255))
    description = db.Column(db.Text)
    imageUrl = db.Column(db.String(1024))
    createdBy = db.Column(db.String(255))
    createdById = db.Column(db.String(255), index=True)
    attributes = db.Column(db.JSON, nullable=False, default=dict)

    def apply(self, data):
        extra = dict(self.attributes or {})
        for key, value in data.items():
            if key == 'id':
                continue
            if key in self.COLUMNS and isinstance(value, str):
                setattr(self, key, value)
                extra.pop(key, None)
            elif key in self.COLUMNS:
                # non-text values for known fields are kept as JSON
                setattr(self, key, None)
                extra[key] = value
            else:
                extra[key] = value
        # reassign so SQLAlchemy notices the JSON change
        self.attributes = extra

    def to_dict(self):
        data = dict(self.attributes or {})
        for key in self.COLUMNS:
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        data['id'] = str(self.id)
        return data

    def __repr__(self):
        return f'<Camera id={self.id} make={self.make} model={self.model}>'
